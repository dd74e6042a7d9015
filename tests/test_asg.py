import pytest

from awstaghelper.asg import get_asgs, parse_asg_tags, split_propagate, tag_asg
from awstaghelper.errors import ResourceListingError

RESPONSE = {
    "AutoScalingGroups": [
        {
            "AutoScalingGroupName": "asg1",
            "Tags": [
                {"Key": "Name", "Value": "ASG1", "PropagateAtLaunch": True, "ResourceId": "asg1"},
                {"Key": "Environment", "Value": "Test", "PropagateAtLaunch": False, "ResourceId": "asg1"},
            ],
        },
        {
            "AutoScalingGroupName": "asg2",
            "Tags": [
                {"Key": "Name", "Value": "ASG2", "PropagateAtLaunch": True, "ResourceId": "asg2"},
                {"Key": "Environment", "Value": "Dev", "PropagateAtLaunch": False, "ResourceId": "asg2"},
            ],
        },
    ]
}


class _Paginator:
    def __init__(self, pages, error):
        self.pages = pages
        self.error = error

    def paginate(self, **kwargs):
        if self.error is not None:
            raise self.error
        return iter(self.pages)


class FakeAutoScaling:
    def __init__(self, pages=(), list_error=None, failing_ids=()):
        self.pages = list(pages)
        self.list_error = list_error
        self.failing_ids = set(failing_ids)
        self.paginators = []
        self.calls = []

    def get_paginator(self, name):
        self.paginators.append(name)
        return _Paginator(self.pages, self.list_error)

    def create_or_update_tags(self, **kwargs):
        self.calls.append(kwargs)
        if kwargs["Tags"][0]["ResourceId"] in self.failing_ids:
            raise RuntimeError("ValidationError: bad group")


def test_get_asgs():
    client = FakeAutoScaling([RESPONSE])
    assert get_asgs(client) == RESPONSE["AutoScalingGroups"]
    assert client.paginators == ["describe_auto_scaling_groups"]


def test_get_asgs_joins_pages():
    first = {"AutoScalingGroups": RESPONSE["AutoScalingGroups"][:1]}
    second = {"AutoScalingGroups": RESPONSE["AutoScalingGroups"][1:]}
    assert get_asgs(FakeAutoScaling([first, second])) == RESPONSE["AutoScalingGroups"]


def test_get_asgs_failure_raises():
    with pytest.raises(ResourceListingError):
        get_asgs(FakeAutoScaling(list_error=RuntimeError("denied")))


def test_parse_asg_tags():
    result = parse_asg_tags("Name,Environment", FakeAutoScaling([RESPONSE]))
    assert result == [
        ["AutoScalingGroupName", "Name", "Environment"],
        ["asg1", "ASG1|Propagate=true", "Test|Propagate=false"],
        ["asg2", "ASG2|Propagate=true", "Dev|Propagate=false"],
    ]


@pytest.mark.parametrize(
    "cell, expected",
    [
        ("ASG1|Propagate=true", ("ASG1", True)),
        ("Test|Propagate=false", ("Test", False)),
        ("Test|Propagate=0", ("Test", False)),
        ("ASG1", ("ASG1", True)),
        ("ASG1|Propagate=maybe", ("ASG1", True)),
        ("a|Propagate=true|Propagate=false", ("a", False)),
    ],
)
def test_split_propagate(cell, expected):
    assert split_propagate(cell) == expected


def test_tag_asg_builds_requests():
    client = FakeAutoScaling()
    csv_data = [
        ["AutoScalingGroupName", "Name", "Environment"],
        ["asg1", "ASG1|Propagate=true", "Test|Propagate=false"],
    ]
    assert tag_asg(csv_data, client) == 1
    assert client.calls == [
        {
            "Tags": [
                {"Key": "Name", "Value": "ASG1", "PropagateAtLaunch": True,
                 "ResourceId": "asg1", "ResourceType": "auto-scaling-group"},
                {"Key": "Environment", "Value": "Test", "PropagateAtLaunch": False,
                 "ResourceId": "asg1", "ResourceType": "auto-scaling-group"},
            ]
        }
    ]


def test_parse_then_tag_round_trip():
    rows = parse_asg_tags("Name,Environment", FakeAutoScaling([RESPONSE]))
    client = FakeAutoScaling()
    assert tag_asg(rows, client) == 2
    sent = {
        (tag["ResourceId"], tag["Key"]): (tag["Value"], tag["PropagateAtLaunch"])
        for call in client.calls
        for tag in call["Tags"]
    }
    expected = {
        (group["AutoScalingGroupName"], tag["Key"]): (tag["Value"], tag["PropagateAtLaunch"])
        for group in RESPONSE["AutoScalingGroups"]
        for tag in group["Tags"]
    }
    assert sent == expected


def test_tag_asg_stops_at_first_failure(capsys):
    client = FakeAutoScaling(failing_ids={"asg1"})
    csv_data = [["AutoScalingGroupName", "Name"], ["asg1", "a"], ["asg2", "b"]]
    assert tag_asg(csv_data, client) == 0
    assert len(client.calls) == 1
    assert "ValidationError: bad group" in capsys.readouterr().out