import logging
import os

import boto3

from asg_hosts.config import AwsCredentials, membership_mode_from_env
from asg_hosts.discovery import event_in_progress, hosts_in_group
from asg_hosts.errors import ConfigurationIncomplete
from asg_hosts.manifest import read_manifest
from asg_hosts.registries import Registries

BUCKET_ENV_VARIABLE_NAME = 'S3_BUCKET_NAME'
KEY_ENV_VARIABLE_NAME = 'S3_KEY_NAME'

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def lambda_handler(event, context):
    # Location of the deploy manifest, overridable per execution
    bucket_name = event.get("bucket_name") or os.environ.get(BUCKET_ENV_VARIABLE_NAME)
    key_name = event.get("key_name") or os.environ.get(KEY_ENV_VARIABLE_NAME)

    try:
        credentials = AwsCredentials.from_env()

        missing = [
            name for name, value in ((BUCKET_ENV_VARIABLE_NAME, bucket_name), (KEY_ENV_VARIABLE_NAME, key_name))
            if not value
        ]
        if missing:
            raise ConfigurationIncomplete(f"Deploy manifest location is missing: {', '.join(missing)}")

        membership = membership_mode_from_env()
        registries = Registries.from_credentials(credentials)
        s3_client = boto3.client('s3', **credentials.client_kwargs())

        role_groups = read_manifest(s3_client, bucket_name, key_name)

        roles = {}
        groups_in_event = []
        for role, group_names in role_groups.items():
            hosts = []
            for group_name in group_names:
                # Members of a scaling group may not be reachable yet
                if event_in_progress(registries, group_name, membership):
                    groups_in_event.append(group_name)
                    continue
                hosts.extend(hosts_in_group(registries, group_name, membership))
            roles[role] = hosts

        logger.info(f"Resolved {len(roles)} roles from s3://{bucket_name}/{key_name}")
        if groups_in_event:
            logger.warning(f"Scaling events in progress for: {', '.join(groups_in_event)}")

        return {
            "roles": roles,
            "groups_in_event": groups_in_event,
            "safe_to_deploy": not groups_in_event
        }

    except Exception as e:
        logger.error(f"Error in resolve_manifest for s3://{bucket_name}/{key_name}: {str(e)}")
        raise
