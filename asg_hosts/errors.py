class AutoscaleError(Exception):
    """Base class for every failure raised while resolving an autoscaling group."""


class GroupNotFound(AutoscaleError):
    def __init__(self, group_name):
        self.group_name = group_name
        super().__init__(f"Auto scaling group: '{group_name}' not found")


class NoTargetGroups(AutoscaleError):
    def __init__(self, group_name):
        self.group_name = group_name
        super().__init__(f"Auto scaling group: '{group_name}' has no associated target groups")


class InstanceNotRunning(AutoscaleError):
    def __init__(self, instance_id):
        self.instance_id = instance_id
        super().__init__(f"No running instance found for instance-id: {instance_id}")


class AddressUnavailable(AutoscaleError):
    def __init__(self, instance_id):
        self.instance_id = instance_id
        super().__init__(f"Unable to map instance-id: {instance_id} to public dns name")


class ConfigurationIncomplete(AutoscaleError):
    pass


class ManifestError(AutoscaleError):
    pass
