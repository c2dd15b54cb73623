"""
Read-only views over the three AWS APIs the resolvers depend on.

Each registry wraps one boto3 client and returns plain response fragments.
Nothing here retries or translates errors: a botocore ClientError reaches
the caller untouched.
"""

import logging
from dataclasses import dataclass

import boto3

logger = logging.getLogger(__name__)

STATE_NAME_FILTER = 'instance-state-name'
RUNNING_STATE = 'running'


class ScalingGroupRegistry:
    def __init__(self, client):
        self.client = client

    def describe_group(self, group_name):
        """Returns the group whose name matches exactly, or None."""
        response = self.client.describe_auto_scaling_groups(
            AutoScalingGroupNames=[group_name]
        )
        for group in response.get("AutoScalingGroups", []):
            if group["AutoScalingGroupName"] == group_name:
                return group
        return None

    def describe_scaling_activities(self, group_name):
        response = self.client.describe_scaling_activities(
            AutoScalingGroupName=group_name
        )
        return response.get("Activities", [])


class LoadBalancingHealthRegistry:
    def __init__(self, client):
        self.client = client

    def describe_target_health(self, target_group_arn):
        """Returns (target id, health state) pairs in response order."""
        response = self.client.describe_target_health(
            TargetGroupArn=target_group_arn
        )
        return [
            (description["Target"]["Id"], description["TargetHealth"]["State"])
            for description in response.get("TargetHealthDescriptions", [])
        ]


class ComputeRegistry:
    def __init__(self, client):
        self.client = client

    def describe_running_instance(self, instance_id):
        """Returns the instance description if it is running, else None."""
        response = self.client.describe_instances(
            InstanceIds=[instance_id],
            Filters=[{'Name': STATE_NAME_FILTER, 'Values': [RUNNING_STATE]}]
        )
        for reservation in response.get("Reservations", []):
            for instance in reservation.get("Instances", []):
                return instance
        return None


@dataclass(frozen=True)
class Registries:
    """The capability bundle handed to every resolver."""

    scaling_groups: ScalingGroupRegistry
    target_health: LoadBalancingHealthRegistry
    compute: ComputeRegistry

    @classmethod
    def from_clients(cls, autoscaling_client, elb_client, ec2_client):
        return cls(
            scaling_groups=ScalingGroupRegistry(autoscaling_client),
            target_health=LoadBalancingHealthRegistry(elb_client),
            compute=ComputeRegistry(ec2_client),
        )

    @classmethod
    def from_credentials(cls, credentials):
        kwargs = credentials.client_kwargs()
        logger.info(f"Building AWS clients for region {credentials.region}")
        return cls.from_clients(
            boto3.client('autoscaling', **kwargs),
            boto3.client('elbv2', **kwargs),
            boto3.client('ec2', **kwargs),
        )
