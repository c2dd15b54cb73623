from datetime import datetime

TEST_AUTOSCALING_GROUP_NAME = 'test-group-name'
TEST_REGION = 'eu-west-1'
TEST_TARGET_GROUP_ARN = 'arn:aws:elasticloadbalancing:eu-west-1:123456789012:targetgroup/test-tg/6d0ecf831eec9f09'
TEST_OTHER_TARGET_GROUP_ARN = 'arn:aws:elasticloadbalancing:eu-west-1:123456789012:targetgroup/other-tg/9a1b2c3d4e5f6a7b'

TEST_CREDENTIALS = {
    'aws_access_key_id': 'testing',
    'aws_secret_access_key': 'testing',
    'region_name': TEST_REGION,
}


def auto_scaling_group(instances=None, target_group_arns=None, name=TEST_AUTOSCALING_GROUP_NAME):
    group = {
        'AutoScalingGroupName': name,
        'LaunchConfigurationName': 'test launch config',
        'MinSize': 2,
        'MaxSize': 10,
        'DesiredCapacity': 5,
        'DefaultCooldown': 0,
        'AvailabilityZones': ['eu-west-1a', 'eu-west-1c'],
        'HealthCheckType': 'ELB',
        'CreatedTime': datetime(2024, 1, 1),
        'Instances': instances or [],
    }
    if target_group_arns is not None:
        group['TargetGroupARNs'] = target_group_arns
    return group


def auto_scaling_instance(instance_id, lifecycle_state='InService'):
    return {
        'InstanceId': instance_id,
        'AvailabilityZone': 'eu-west-1a',
        'LifecycleState': lifecycle_state,
        'HealthStatus': 'Healthy',
        'LaunchConfigurationName': 'Launch Config #1',
        'ProtectedFromScaleIn': False,
    }


def target_health(instance_id, state):
    return {
        'Target': {'Id': instance_id, 'Port': 80},
        'TargetHealth': {'State': state},
    }


def running_instance(instance_id, public_dns_name):
    return {'Reservations': [{'Instances': [{'InstanceId': instance_id, 'PublicDnsName': public_dns_name}]}]}


def describe_instances_params(instance_id):
    return {
        'InstanceIds': [instance_id],
        'Filters': [{'Name': 'instance-state-name', 'Values': ['running']}],
    }
