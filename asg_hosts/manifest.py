"""
Deploy manifest: binds deployment roles to autoscaling groups.

    Roles:
      web: web-asg
      worker:
        - worker-asg-a
        - worker-asg-b
"""

import logging

import yaml

from asg_hosts.errors import ManifestError

logger = logging.getLogger(__name__)


def parse_manifest(yaml_content):
    """Returns {role: [group names]} in manifest order."""
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ManifestError(f"Could not parse YAML content. {e}") from e

    roles = data.get('Roles') if isinstance(data, dict) else None
    if not isinstance(roles, dict) or not roles:
        raise ManifestError("Manifest must contain a non-empty 'Roles' mapping")

    role_groups = {}
    for role, groups in roles.items():
        if isinstance(groups, str):
            groups = [groups]
        if not isinstance(groups, list) or not groups or not all(isinstance(g, str) and g for g in groups):
            raise ManifestError(f"Role '{role}' must name one or more autoscaling groups")
        role_groups[str(role)] = groups

    return role_groups


def read_manifest(s3_client, bucket_name, key_name):
    logger.info(f"Attempting to read s3://{bucket_name}/{key_name}")
    s3_object = s3_client.get_object(Bucket=bucket_name, Key=key_name)
    yaml_content = s3_object['Body'].read().decode('utf-8')
    return parse_manifest(yaml_content)
