import logging

from asg_hosts.config import AwsCredentials, membership_mode_from_env
from asg_hosts.discovery import event_in_progress
from asg_hosts.registries import Registries

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def lambda_handler(event, context):
    asg_name = event["asg_name"]

    try:
        credentials = AwsCredentials.from_env()
        membership = membership_mode_from_env()
        registries = Registries.from_credentials(credentials)

        in_progress = event_in_progress(registries, asg_name, membership)
        if in_progress:
            logger.warning(f"Scaling event in progress for {asg_name}. Not safe to deploy yet.")

        # The Step Function's Choice state waits and polls again while this is False
        return {
            "asg_name": asg_name,
            "event_in_progress": in_progress,
            "safe_to_deploy": not in_progress
        }

    except Exception as e:
        logger.error(f"Error in check_scaling_event for {asg_name}: {str(e)}")
        raise
