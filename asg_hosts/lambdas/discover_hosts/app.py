import logging

from asg_hosts.config import AwsCredentials, membership_mode_from_env
from asg_hosts.discovery import hosts_in_group
from asg_hosts.registries import Registries

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def lambda_handler(event, context):
    asg_name = event["asg_name"]

    try:
        credentials = AwsCredentials.from_env()
        membership = membership_mode_from_env()
        registries = Registries.from_credentials(credentials)

        hosts = hosts_in_group(registries, asg_name, membership)

        return {
            "asg_name": asg_name,
            "hosts": hosts,
            "host_count": len(hosts)
        }

    except Exception as e:
        logger.error(f"Error in discover_hosts for {asg_name}: {str(e)}")
        raise # Let the Step Function's Catch block decide what to do
