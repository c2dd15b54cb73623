from types import SimpleNamespace

import boto3
import pytest
from botocore.stub import Stubber

from asg_hosts.registries import Registries
from tests.consts import TEST_AUTOSCALING_GROUP_NAME, TEST_CREDENTIALS, TEST_REGION


@pytest.fixture
def aws_clients():
    return SimpleNamespace(
        autoscaling=boto3.client('autoscaling', **TEST_CREDENTIALS),
        elb=boto3.client('elbv2', **TEST_CREDENTIALS),
        ec2=boto3.client('ec2', **TEST_CREDENTIALS),
    )


@pytest.fixture
def stubs(aws_clients):
    stubs = SimpleNamespace(
        autoscaling=Stubber(aws_clients.autoscaling),
        elb=Stubber(aws_clients.elb),
        ec2=Stubber(aws_clients.ec2),
    )
    for stub in vars(stubs).values():
        stub.activate()

    yield stubs

    for stub in vars(stubs).values():
        stub.assert_no_pending_responses()
        stub.deactivate()


@pytest.fixture
def registries(aws_clients, stubs):
    return Registries.from_clients(aws_clients.autoscaling, aws_clients.elb, aws_clients.ec2)


@pytest.fixture
def stub_group(stubs):
    def _stub_group(group=None):
        groups = [group] if group is not None else []
        stubs.autoscaling.add_response(
            'describe_auto_scaling_groups',
            {'AutoScalingGroups': groups},
            {'AutoScalingGroupNames': [TEST_AUTOSCALING_GROUP_NAME]},
        )
    return _stub_group


@pytest.fixture
def aws_env(monkeypatch):
    monkeypatch.setenv('DEPLOY_AWS_ACCESS_KEY', 'testing')
    monkeypatch.setenv('DEPLOY_AWS_ACCESS_SECRET_KEY', 'testing')
    monkeypatch.setenv('DEPLOY_AWS_REGION', TEST_REGION)
    monkeypatch.delenv('ASG_MEMBERSHIP_MODE', raising=False)
