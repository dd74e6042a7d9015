# awstaghelper

Keep the tags on your AWS resources in a spreadsheet.

`awstaghelper` reads the tags of AWS resources into CSV rows, one row for each
resource and one column for each tag you ask for. You edit the file, and the
package then writes the tags from the file back to the resources.

The package has no dependencies of its own. Every function takes a client
object that you create and pass in: it must expose the service's operations as
methods taking keyword arguments (for example `client.create_tags(Resources=...,
Tags=...)`) and, for listed resources, `client.get_paginator(name).paginate(...)`,
as the clients of the AWS SDK for Python do.

## Supported resources

| Module              | Resources                               | First column           |
|---------------------|-----------------------------------------|------------------------|
| `asg`               | Auto Scaling groups                     | `AutoScalingGroupName` |
| `cloudfront`        | CloudFront distributions                | `Arn`                  |
| `cloudwatch`        | CloudWatch alarms and log groups        | `Arn`                  |
| `config_rule`       | AWS Config rules                        | `Arn`                  |
| `ebs`               | EBS volumes                             | `VolumeId`             |
| `ec2`               | EC2 instances                           | `Id`                   |
| `ec2_sg`            | Security groups                         | `Id`                   |
| `ec2_snapshot`      | EBS snapshots owned by the account      | `Id`                   |
| `ecr`               | ECR repositories                        | `Arn`                  |
| `elastic_search`    | Elasticsearch domains                   | `Arn`                  |
| `elasticache`       | ElastiCache clusters                    | `Arn`                  |
| `elasticbeanstalk`  | Elastic Beanstalk environments          | `Arn`                  |
| `elb`               | Application and network load balancers  | `Arn`                  |
| `iam`               | IAM users and roles                     | `UserName`, `RoleName` |
| `kinesis`           | Kinesis data streams, Firehose streams  | `Name`                 |
| `lambda_functions`  | Lambda functions                        | `Arn`                  |
| `rds`               | RDS instances                           | `Arn`                  |
| `redshift`          | Redshift clusters                       | `Arn`                  |
| `s3`                | S3 buckets                              | `Name`                 |
| `wafv2`             | WAFv2 web ACLs, regional or CloudFront  | `Arn`                  |

Each module has a `get_*` function that lists the resources, a `parse_*_tags`
function that builds the CSV rows, and a `tag_*` function that applies rows back.

## The CSV format

The first row holds the name of the identifier column followed by the tag keys;
every other row holds a resource identifier followed by its tag values. A tag the
resource does not carry comes out as an empty cell.

```
Id,Name,Environment,Owner
i-666666,TestInstance1,Test,
i-777777,TestInstance2,Test,ops
```

`awstaghelper.tabular` holds the CSV helpers:

- `write_csv(rows, filename)` writes the rows, replacing any existing file.
- `read_csv(filename)` reads every record, skipping blank lines, and raises
  `ValueError` if the records do not all have the same number of fields.
- `header_row(tags_to_read, resource_id_header)` and
  `tag_row(tags_to_read, tags, resource_id)` build rows; `tags_to_read` is a
  comma-separated list of tag keys such as `"Name,Environment"`.
- `tag_requests(csv_data)` yields `(resource_id, [(key, value), ...])` for each
  data row, and raises `ValueError` for a row shorter than the header.

Auto Scaling group tags also record whether they propagate to launched
instances, written as `Value|Propagate=true` or `Value|Propagate=false`.
`asg.split_propagate` reads such a cell back: a value without the suffix, or
with a suffix that is not a false word (`0`, `f`, `F`, `false`, `False`,
`FALSE`), propagates; a cell with the marker more than once is logged as
invalid and does not propagate.

## Usage

```python
from awstaghelper.ec2 import parse_ec2_tags, tag_ec2
from awstaghelper.tabular import read_csv, write_csv

rows = parse_ec2_tags("Name,Environment,Owner", ec2_client)
write_csv(rows, "awsTags.csv")

# ... edit awsTags.csv ...

tagged = tag_ec2(read_csv("awsTags.csv"), ec2_client)
```

Services whose ARNs are built from the account id also take an STS client, and
some the region:

```python
from awstaghelper.redshift import parse_redshift_tags
from awstaghelper.ec2_snapshot import parse_snapshot_tags

clusters = parse_redshift_tags("Name,Owner", redshift_client, sts_client, "us-east-1")
snapshots = parse_snapshot_tags("Name,Owner", ec2_client, sts_client)
```

The same holds for `cloudwatch.parse_cw_log_group_tags`,
`elastic_search.parse_elasticsearch_tags` and
`elasticache.parse_elasticache_cluster_tags`.

Web ACLs are listed per scope, following the listing's markers:

```python
from awstaghelper.wafv2 import parse_web_acl_tags

regional = parse_web_acl_tags("Name,Owner", "REGIONAL", wafv2_client)
cloudfront = parse_web_acl_tags("Name,Owner", "CLOUDFRONT", wafv2_global_client)
```

The tags of a web ACL are read five at a time, and each page of tags makes a
row of its own.

## Errors

- If the resources of a service, or the account id, cannot be fetched, an
  `awstaghelper.errors.ResourceListingError` is raised.
- If the tags of one resource cannot be fetched, a message is printed and that
  resource's row has empty tag cells. For S3, a bucket without a tag set and a
  bucket in another region get messages of their own.
- Every `tag_*` function applies rows in order and returns the number of
  resources tagged. At the first failed request the error is printed (see
  `errors.report_error`) and the remaining rows are left untouched.

## What the package does not do

There is no command-line tool. The package does not create AWS sessions or
clients, does not read profiles, regions or configuration files, and does not
pick a region for CloudFront-scoped web ACLs: you build the clients and pass
them in.