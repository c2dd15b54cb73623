import os
from dataclasses import dataclass

from asg_hosts.errors import ConfigurationIncomplete

ACCESS_KEY_ENV_VARIABLE_NAME = 'DEPLOY_AWS_ACCESS_KEY'
SECRET_KEY_ENV_VARIABLE_NAME = 'DEPLOY_AWS_ACCESS_SECRET_KEY'
REGION_ENV_VARIABLE_NAME = 'DEPLOY_AWS_REGION'
MEMBERSHIP_MODE_ENV_VARIABLE_NAME = 'ASG_MEMBERSHIP_MODE'

# How a group's members are enumerated
MEMBERSHIP_AUTO = 'auto'
MEMBERSHIP_INSTANCES = 'instances'
MEMBERSHIP_TARGET_GROUPS = 'target-groups'
MEMBERSHIP_MODES = (MEMBERSHIP_AUTO, MEMBERSHIP_INSTANCES, MEMBERSHIP_TARGET_GROUPS)


@dataclass(frozen=True)
class AwsCredentials:
    """Complete credential bundle used to build the registry clients.

    Constructed once at process start and passed to whatever builds clients.
    A partial bundle is never produced: `from_env` raises instead.
    """

    access_key_id: str
    secret_access_key: str
    region: str

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ

        values = {
            ACCESS_KEY_ENV_VARIABLE_NAME: environ.get(ACCESS_KEY_ENV_VARIABLE_NAME),
            SECRET_KEY_ENV_VARIABLE_NAME: environ.get(SECRET_KEY_ENV_VARIABLE_NAME),
            REGION_ENV_VARIABLE_NAME: environ.get(REGION_ENV_VARIABLE_NAME),
        }
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise ConfigurationIncomplete(
                f"AWS environment variables are missing: {', '.join(missing)}"
            )

        return cls(
            access_key_id=values[ACCESS_KEY_ENV_VARIABLE_NAME],
            secret_access_key=values[SECRET_KEY_ENV_VARIABLE_NAME],
            region=values[REGION_ENV_VARIABLE_NAME],
        )

    def client_kwargs(self):
        return {
            'aws_access_key_id': self.access_key_id,
            'aws_secret_access_key': self.secret_access_key,
            'region_name': self.region,
        }


def membership_mode_from_env(environ=None):
    environ = os.environ if environ is None else environ

    mode = environ.get(MEMBERSHIP_MODE_ENV_VARIABLE_NAME) or MEMBERSHIP_AUTO
    mode = mode.strip().lower()
    if mode not in MEMBERSHIP_MODES:
        raise ConfigurationIncomplete(
            f"{MEMBERSHIP_MODE_ENV_VARIABLE_NAME} must be one of {', '.join(MEMBERSHIP_MODES)}, got '{mode}'"
        )
    return mode
