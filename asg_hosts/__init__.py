from asg_hosts.config import AwsCredentials
from asg_hosts.discovery import event_in_progress, hosts_in_group, scaling_activity_in_progress
from asg_hosts.errors import (
    AddressUnavailable,
    AutoscaleError,
    ConfigurationIncomplete,
    GroupNotFound,
    InstanceNotRunning,
    ManifestError,
    NoTargetGroups,
)
from asg_hosts.registries import Registries

__all__ = [
    'AddressUnavailable',
    'AutoscaleError',
    'AwsCredentials',
    'ConfigurationIncomplete',
    'GroupNotFound',
    'InstanceNotRunning',
    'ManifestError',
    'NoTargetGroups',
    'Registries',
    'event_in_progress',
    'hosts_in_group',
    'scaling_activity_in_progress',
]
