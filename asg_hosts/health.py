from asg_hosts.models import HEALTHY_STATE

SUCCESSFUL_ACTIVITY_STATUS = 'Successful'


def event_in_progress(records, ready_state=HEALTHY_STATE):
    """True when any member is not in `ready_state`.

    Only the one ready value counts as stable; every other state, including
    ones AWS adds later, means a scaling event may be under way. No members
    at all is stable.
    """
    return any(record.state != ready_state for record in records)


def activity_in_progress(activities):
    """True when the group has scaling activities and none of them succeeded."""
    return bool(activities) and not any(
        activity["StatusCode"] == SUCCESSFUL_ACTIVITY_STATUS for activity in activities
    )
