import logging

from asg_hosts.errors import AddressUnavailable, InstanceNotRunning

logger = logging.getLogger(__name__)


def resolve_address(registries, instance_id):
    logger.info(f"locating public dns name for instance id: {instance_id}")

    instance = registries.compute.describe_running_instance(instance_id)
    if instance is None:
        raise InstanceNotRunning(instance_id)

    # EC2 reports an empty string until a public name is assigned
    dns_name = instance.get("PublicDnsName")
    if not dns_name:
        raise AddressUnavailable(instance_id)

    logger.info(f"Mapped {instance_id} : {dns_name}")
    return dns_name
