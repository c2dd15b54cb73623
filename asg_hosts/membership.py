"""
Member enumeration for a located autoscaling group.

Two shapes exist. Older groups list their instances directly and every listed
instance counts as a host. Groups behind a load balancer are enumerated
through their target groups, where only targets reporting "healthy" count.
The two health rules differ on purpose; see DESIGN.md before unifying them.
"""

import logging

from asg_hosts.errors import NoTargetGroups
from asg_hosts.models import DirectMembers, HEALTHY_STATE, MemberHealthRecord, TargetGroupMembers

logger = logging.getLogger(__name__)


def resolve_members(registries, descriptor):
    """Returns one MemberHealthRecord per member, in enumeration order."""
    if isinstance(descriptor, DirectMembers):
        logger.info(f"Discovered {len(descriptor.instances)} instances in {descriptor.group_name}")
        return list(descriptor.instances)

    if isinstance(descriptor, TargetGroupMembers):
        return _target_group_members(registries, descriptor)

    raise TypeError(f"Unsupported group descriptor: {descriptor!r}")


def healthy_member_ids(registries, descriptor):
    """Returns the instance ids that should receive a deployment."""
    if isinstance(descriptor, DirectMembers):
        logger.info(f"Discovered {len(descriptor.instances)} instances in {descriptor.group_name}")
        return descriptor.instance_ids

    return [
        record.member_id
        for record in resolve_members(registries, descriptor)
        if record.state == HEALTHY_STATE
    ]


def _target_group_members(registries, descriptor):
    if not descriptor.target_group_arns:
        raise NoTargetGroups(descriptor.group_name)

    records = []
    for tg_arn in descriptor.target_group_arns:
        targets = registries.target_health.describe_target_health(tg_arn)
        logger.info(f"Target Group {tg_arn} reports {len(targets)} registered targets")

        for target_id, state in targets:
            if state != HEALTHY_STATE:
                logger.info(f"Target Group {tg_arn} has target {target_id} in state: {state}")
            records.append(MemberHealthRecord(target_id, state))

    return records
