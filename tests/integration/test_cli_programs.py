"""Run the CLI programs end to end against moto."""

import json

import pytest

from aws_snippets.cli import (
    configure_dead_letter_queue,
    create_custom_metric,
    get_queue_url,
    run_scenario,
)

TEST_REGION = "us-west-2"
TEST_ACCOUNT_ID = "123456789012"


@pytest.fixture
def sqs_boto(aws_session):
    return aws_session.client("sqs", region_name=TEST_REGION)


def test_get_queue_url_program(capsys, sqs_boto):
    url = sqs_boto.create_queue(QueueName="orders")["QueueUrl"]

    assert get_queue_url.main(["-n", "orders"]) == 0

    assert f"URL for queue orders: {url}" in capsys.readouterr().out


def test_get_queue_url_program_reports_missing_queue(capsys, aws_session):
    assert get_queue_url.main(["-n", "does-not-exist"]) == 0

    out = capsys.readouterr().out
    assert "Got an error getting the queue URL:" in out


def test_configure_dead_letter_queue_program(capsys, sqs_boto):
    queue_url = sqs_boto.create_queue(QueueName="q1")["QueueUrl"]
    sqs_boto.create_queue(QueueName="dlq1")
    dl_arn = f"arn:aws:sqs:{TEST_REGION}:{TEST_ACCOUNT_ID}:dlq1"

    assert configure_dead_letter_queue.main(["-u", queue_url, "-d", dl_arn]) == 0

    assert "Created dead-letter queue" in capsys.readouterr().out
    attributes = sqs_boto.get_queue_attributes(
        QueueUrl=queue_url, AttributeNames=["RedrivePolicy"]
    )["Attributes"]
    assert json.loads(attributes["RedrivePolicy"])["deadLetterTargetArn"] == dl_arn


def test_create_custom_metric_program(capsys, aws_session):
    argv = ["-n", "SITE/TRAFFIC", "-m", "PageViews", "-u", "Count", "-v", "12",
            "-dn", "PageURL", "-dv", "my-page.html"]

    assert create_custom_metric.main(argv) == 0

    assert "Created metric PageViews" in capsys.readouterr().out
    metrics = aws_session.client("cloudwatch").list_metrics(Namespace="SITE/TRAFFIC")["Metrics"]
    assert [m["MetricName"] for m in metrics] == ["PageViews"]


def test_scenario_program(capsys, aws_session, write_config, sqs_boto):
    path = write_config({"QueueName": "q1", "DlQueueName": "dlq1"})

    assert run_scenario.main(["dead-letter-queue", "-c", path]) == 0

    out = capsys.readouterr().out
    assert f"dead_letter_queue_arn: arn:aws:sqs:{TEST_REGION}:{TEST_ACCOUNT_ID}:dlq1" in out
    assert sqs_boto.list_queues().get("QueueUrls", []) == []


def test_scenario_program_with_unreadable_config(capsys, aws_session, tmp_path, sqs_boto):
    path = str(tmp_path / "missing.json")

    assert run_scenario.main(["get-queue-url", "-c", path]) == 0

    out = capsys.readouterr().out
    assert "Got an error running the scenario:" in out
    assert "Could not read configuration file" in out
    assert sqs_boto.list_queues().get("QueueUrls", []) == []
