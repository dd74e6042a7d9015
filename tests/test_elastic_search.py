import pytest

from awstaghelper.elastic_search import (
    get_elasticsearch_domains,
    parse_elasticsearch_tags,
    tag_elasticsearch,
)
from awstaghelper.errors import ResourceListingError

DOMAINS = {"DomainNames": [{"DomainName": "test-cluster-1"}]}
DOMAIN_ARN = "arn:aws:es:us-east-1:666666666:domain/test-cluster-1"


class Search:
    def __init__(self, list_error=None, sts_error=None, fail_on=None):
        self.list_error = list_error
        self.sts_error = sts_error
        self.fail_on = fail_on
        self.tag_queries = []
        self.calls = []

    def list_domain_names(self):
        if self.list_error:
            raise self.list_error
        return DOMAINS

    def get_caller_identity(self):
        if self.sts_error:
            raise self.sts_error
        return {"Account": "666666666"}

    def list_tags(self, ARN):
        self.tag_queries.append(ARN)
        return {"TagList": [{"Key": "Name", "Value": "test-cluster-1"}, {"Key": "Owner", "Value": "test-owner"}]}

    def add_tags(self, ARN, TagList):
        self.calls.append((ARN, TagList))
        if ARN == self.fail_on:
            raise RuntimeError("denied")


def test_get_elasticsearch_domains():
    assert get_elasticsearch_domains(Search()) == DOMAINS


def test_parse_elasticsearch_tags():
    client = Search()
    assert parse_elasticsearch_tags("Name,Owner", client, client, "us-east-1") == [
        ["Arn", "Name", "Owner"],
        [DOMAIN_ARN, "test-cluster-1", "test-owner"],
    ]
    assert client.tag_queries == [DOMAIN_ARN]


@pytest.mark.parametrize(
    "client, call",
    [
        (Search(list_error=RuntimeError("boom")), get_elasticsearch_domains),
        (Search(sts_error=RuntimeError("no identity")), lambda c: parse_elasticsearch_tags("Name", c, c, "us-east-1")),
    ],
)
def test_listing_failures(client, call):
    with pytest.raises(ResourceListingError):
        call(client)


@pytest.mark.parametrize(
    "fail_on, tagged, attempted",
    [(None, 3, ["arn-1", "arn-2", "arn-3"]), ("arn-2", 1, ["arn-1", "arn-2"])],
)
def test_tag_elasticsearch(fail_on, tagged, attempted):
    client = Search(fail_on=fail_on)
    rows = [["Arn", "Name"], ["arn-1", "a"], ["arn-2", "b"], ["arn-3", "c"]]
    assert tag_elasticsearch(rows, client) == tagged
    assert [arn for arn, _ in client.calls] == attempted
    assert client.calls[0] == ("arn-1", [{"Key": "Name", "Value": "a"}])