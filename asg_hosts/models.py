from dataclasses import dataclass
from typing import Tuple

HEALTHY_STATE = 'healthy'
IN_SERVICE_STATE = 'InService'


@dataclass(frozen=True)
class MemberHealthRecord:
    member_id: str
    state: str


@dataclass(frozen=True)
class DirectMembers:
    """A group whose instances are listed on the group itself.

    Each record carries the instance's lifecycle state as reported by the
    group; no separate health check is made for these members.
    """

    group_name: str
    instances: Tuple[MemberHealthRecord, ...] = ()

    ready_state = IN_SERVICE_STATE

    @property
    def instance_ids(self):
        return [record.member_id for record in self.instances]


@dataclass(frozen=True)
class TargetGroupMembers:
    """A group whose members are the targets of its load balancer target groups."""

    group_name: str
    target_group_arns: Tuple[str, ...] = ()

    ready_state = HEALTHY_STATE
