import logging

from asg_hosts.config import MEMBERSHIP_AUTO, MEMBERSHIP_INSTANCES, MEMBERSHIP_TARGET_GROUPS
from asg_hosts.errors import GroupNotFound
from asg_hosts.models import DirectMembers, MemberHealthRecord, TargetGroupMembers

logger = logging.getLogger(__name__)


def locate(registries, group_name, membership=MEMBERSHIP_AUTO):
    """Fetches the named group and returns the descriptor for its membership shape.

    With membership "auto" a group attached to target groups resolves through
    them; anything else, including a brand new group with no instances yet,
    resolves through its own instance list.
    """
    logger.info(f"Checking autoscaling group: {group_name}")
    group = registries.scaling_groups.describe_group(group_name)
    if group is None:
        raise GroupNotFound(group_name)

    target_group_arns = tuple(group.get("TargetGroupARNs") or ())
    instances = tuple(
        MemberHealthRecord(instance["InstanceId"], instance["LifecycleState"])
        for instance in group.get("Instances") or ()
    )

    if membership == MEMBERSHIP_TARGET_GROUPS:
        return TargetGroupMembers(group_name, target_group_arns)
    if membership == MEMBERSHIP_INSTANCES:
        return DirectMembers(group_name, instances)
    if membership != MEMBERSHIP_AUTO:
        raise ValueError(f"Unknown membership mode: {membership}")

    if target_group_arns:
        return TargetGroupMembers(group_name, target_group_arns)
    return DirectMembers(group_name, instances)
