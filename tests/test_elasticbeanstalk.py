import pytest

from awstaghelper.elasticbeanstalk import (
    get_eb_environments,
    parse_eb_tags,
    tag_eb_environments,
)
from awstaghelper.errors import ResourceListingError

ENV_ARN = "arn:aws:elasticbeanstalk:us-east-1:12345678:environment/test-app/test-env"
ENVIRONMENTS = {"Environments": [{"EnvironmentArn": ENV_ARN}]}


class Beanstalk:
    def __init__(self, error=None, fail_on=None):
        self.error = error
        self.fail_on = fail_on
        self.tag_calls = []

    def describe_environments(self):
        if self.error:
            raise self.error
        return ENVIRONMENTS

    def list_tags_for_resource(self, ResourceArn):
        return {"ResourceTags": [{"Key": "Name", "Value": "test-eb1"}, {"Key": "Owner", "Value": "platform-team"}]}

    def update_tags_for_resource(self, ResourceArn, TagsToAdd):
        if ResourceArn == self.fail_on:
            raise RuntimeError("denied")
        self.tag_calls.append((ResourceArn, TagsToAdd))


def test_get_eb_environments():
    assert get_eb_environments(Beanstalk()) == ENVIRONMENTS


def test_get_eb_environments_error():
    with pytest.raises(ResourceListingError):
        get_eb_environments(Beanstalk(error=RuntimeError("boom")))


def test_parse_eb_tags():
    assert parse_eb_tags("Name,Owner", Beanstalk()) == [
        ["Arn", "Name", "Owner"],
        [ENV_ARN, "test-eb1", "platform-team"],
    ]


@pytest.mark.parametrize(
    "fail_on, tagged, sent",
    [
        (None, 2, [(ENV_ARN, [{"Key": "Name", "Value": "env"}, {"Key": "Owner", "Value": "team"}])]),
        (ENV_ARN, 0, []),
    ],
)
def test_tag_eb_environments(fail_on, tagged, sent):
    client = Beanstalk(fail_on=fail_on)
    csv_data = [["Arn", "Name", "Owner"], [ENV_ARN, "env", "team"], ["arn:b", "y", "z"]]
    assert tag_eb_environments(csv_data, client) == tagged
    assert client.tag_calls[:1] == sent