"""
Entry points used by the deployment tooling.

`hosts_in_group` answers "where do I deploy", `event_in_progress` answers
"is it safe to deploy now". Both look the group up afresh on every call and
make their AWS calls one after another, in enumeration order.
"""

import logging

from asg_hosts import health
from asg_hosts.config import MEMBERSHIP_AUTO
from asg_hosts.dns import resolve_address
from asg_hosts.locator import locate
from asg_hosts.membership import healthy_member_ids, resolve_members

logger = logging.getLogger(__name__)


def hosts_in_group(registries, group_name, membership=MEMBERSHIP_AUTO):
    descriptor = locate(registries, group_name, membership)

    # A single unresolvable member fails the whole listing
    hosts = [
        resolve_address(registries, instance_id)
        for instance_id in healthy_member_ids(registries, descriptor)
    ]

    logger.info(f"Located hosts {', '.join(hosts)}")
    return hosts


def event_in_progress(registries, group_name, membership=MEMBERSHIP_AUTO):
    descriptor = locate(registries, group_name, membership)
    records = resolve_members(registries, descriptor)

    in_progress = health.event_in_progress(records, descriptor.ready_state)
    logger.info(f"Scaling event in progress for {group_name}: {in_progress}")
    return in_progress


def scaling_activity_in_progress(registries, group_name):
    activities = registries.scaling_groups.describe_scaling_activities(group_name)

    in_progress = health.activity_in_progress(activities)
    logger.info(f"{len(activities)} scaling activities for {group_name}, in progress: {in_progress}")
    return in_progress
