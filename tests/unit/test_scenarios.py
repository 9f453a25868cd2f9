"""Test scenario orchestration against mocked service wrappers."""

from unittest.mock import MagicMock, Mock, call

import pytest

from aws_snippets.clients.cloudwatch_client import CloudWatchClient
from aws_snippets.core.config import AlarmScenarioConfig, QueueScenarioConfig
from aws_snippets.core.error_handling import (
    ArnParseError,
    ConfigurationError,
    ResourceNotFoundError,
    ScenarioError,
)
from aws_snippets.lifecycle.scenarios import (
    run_dead_letter_queue_scenario,
    run_disable_alarm_scenario,
    run_get_queue_url_scenario,
)

BASE_URL = "https://sqs.us-west-2.amazonaws.com/123456789012"


def create_mock_sqs():
    sqs = Mock()
    sqs.region_name = "us-west-2"
    sqs.create_queue.side_effect = lambda name: f"{BASE_URL}/{name}"
    sqs.get_queue_url.side_effect = lambda name: f"{BASE_URL}/{name}"
    return sqs


def create_mock_cloudwatch():
    cloudwatch = Mock()
    cloudwatch.put_alarm.side_effect = lambda alarm_name, instance_name, instance_id: alarm_name
    return cloudwatch


def create_mock_sts(account_id="123456789012"):
    sts = Mock()
    sts.get_account_id.return_value = account_id
    return sts


def test_dead_letter_queue_scenario_sequence():
    """q1 and dlq1 are created, wired with maxReceiveCount=10 and deleted."""
    sqs = create_mock_sqs()
    config = QueueScenarioConfig(queue_name="q1", dl_queue_name="dlq1")

    result = run_dead_letter_queue_scenario(config, sqs)

    assert sqs.create_queue.call_args_list == [call("q1"), call("dlq1")]
    sqs.configure_dead_letter_queue.assert_called_once_with(
        "arn:aws:sqs:us-west-2:123456789012:dlq1", f"{BASE_URL}/q1", 10
    )
    assert sorted(c.args[0] for c in sqs.delete_queue.call_args_list) == [
        f"{BASE_URL}/dlq1",
        f"{BASE_URL}/q1",
    ]
    assert result.dead_letter_queue_arn == "arn:aws:sqs:us-west-2:123456789012:dlq1"
    assert result.max_receive_count == 10


def test_dead_letter_queue_scenario_generates_names():
    sqs = create_mock_sqs()

    result = run_dead_letter_queue_scenario(QueueScenarioConfig(), sqs)

    assert result.queue_name.startswith("myqueue-")
    assert result.dead_letter_queue_name.startswith("mydlqueue-")
    assert sqs.delete_queue.call_count == 2


def test_dead_letter_queue_scenario_cleans_up_when_configuration_fails():
    sqs = create_mock_sqs()
    sqs.configure_dead_letter_queue.side_effect = RuntimeError("access denied")

    with pytest.raises(RuntimeError, match="access denied"):
        run_dead_letter_queue_scenario(
            QueueScenarioConfig(queue_name="q1", dl_queue_name="dlq1"), sqs
        )

    assert sqs.delete_queue.call_count == 2


def test_dead_letter_queue_scenario_cleans_up_on_unparseable_url():
    sqs = Mock()
    sqs.create_queue.side_effect = lambda name: f"http://localhost:4566/000000000000/{name}"

    with pytest.raises(ArnParseError):
        run_dead_letter_queue_scenario(
            QueueScenarioConfig(queue_name="q1", dl_queue_name="dlq1"), sqs
        )

    sqs.configure_dead_letter_queue.assert_not_called()
    assert sqs.delete_queue.call_count == 2


def test_malformed_config_creates_nothing(write_config):
    sqs = create_mock_sqs()
    path = write_config("{\"QueueName\": ")

    with pytest.raises(ConfigurationError):
        run_dead_letter_queue_scenario(QueueScenarioConfig.from_file(path), sqs)

    sqs.create_queue.assert_not_called()


def test_get_queue_url_reuses_named_queue():
    sqs = create_mock_sqs()
    sts = create_mock_sts()

    result = run_get_queue_url_scenario(QueueScenarioConfig(queue_name="existing"), sqs, sts)

    sqs.create_queue.assert_not_called()
    sqs.delete_queue.assert_not_called()
    assert result.queue_url == f"{BASE_URL}/existing"
    assert result.expected_url == result.queue_url
    assert not result.queue_created


def test_get_queue_url_creates_and_deletes_generated_queue():
    sqs = create_mock_sqs()
    sts = create_mock_sts()

    result = run_get_queue_url_scenario(QueueScenarioConfig(), sqs, sts)

    assert result.queue_created
    assert result.queue_name.startswith("myqueue-")
    sqs.create_queue.assert_called_once_with(result.queue_name)
    sqs.delete_queue.assert_called_once_with(result.queue_url)


def test_get_queue_url_mismatch():
    sqs = create_mock_sqs()
    sts = create_mock_sts(account_id="210987654321")

    with pytest.raises(ScenarioError, match="does not match"):
        run_get_queue_url_scenario(QueueScenarioConfig(), sqs, sts)

    # The generated queue is still deleted
    sqs.delete_queue.assert_called_once()


def test_disable_alarm_scenario_with_configured_instance():
    cloudwatch = create_mock_cloudwatch()
    ec2 = Mock()
    config = AlarmScenarioConfig(instance_name="web", instance_id="i-0abc", alarm_name="a1")

    result = run_disable_alarm_scenario(config, cloudwatch, ec2)

    ec2.find_named_instance.assert_not_called()
    assert cloudwatch.method_calls == [
        call.put_alarm("a1", "web", "i-0abc"),
        call.enable_alarm_actions("a1"),
        call.disable_alarm("a1"),
        call.delete_alarm("a1"),
    ]
    assert result.alarm_name == "a1"


def test_disable_alarm_scenario_looks_up_instance():
    cloudwatch = create_mock_cloudwatch()
    ec2 = Mock()
    ec2.find_named_instance.return_value = ("i-0def", "db")

    result = run_disable_alarm_scenario(AlarmScenarioConfig(), cloudwatch, ec2)

    assert (result.instance_id, result.instance_name) == ("i-0def", "db")
    assert result.alarm_name.startswith("Alarm70-")
    cloudwatch.delete_alarm.assert_called_once_with(result.alarm_name)


def test_disable_alarm_scenario_deletes_alarm_when_disable_fails():
    cloudwatch = create_mock_cloudwatch()
    cloudwatch.disable_alarm.side_effect = RuntimeError("throttled")
    config = AlarmScenarioConfig(instance_name="web", instance_id="i-0abc", alarm_name="a1")

    with pytest.raises(RuntimeError):
        run_disable_alarm_scenario(config, cloudwatch)

    cloudwatch.delete_alarm.assert_called_once_with("a1")


def test_disable_alarm_scenario_without_instance():
    cloudwatch = create_mock_cloudwatch()
    ec2 = Mock()
    ec2.find_named_instance.side_effect = ResourceNotFoundError("No EC2 instance found with name and ID")

    with pytest.raises(ResourceNotFoundError):
        run_disable_alarm_scenario(AlarmScenarioConfig(), cloudwatch, ec2)

    cloudwatch.put_alarm.assert_not_called()


def test_disable_alarm_scenario_requires_ec2_client_for_lookup():
    with pytest.raises(ScenarioError):
        run_disable_alarm_scenario(AlarmScenarioConfig(alarm_name="a1"), Mock())


def test_disable_alarm_scenario_deletes_alarm_when_enable_actions_fails():
    boto_client = MagicMock()
    boto_client.meta.region_name = "us-west-2"
    boto_client.enable_alarm_actions.side_effect = RuntimeError("throttled")
    cloudwatch = CloudWatchClient(client=boto_client)
    config = AlarmScenarioConfig(instance_name="web", instance_id="i-0abc", alarm_name="a1")

    with pytest.raises(RuntimeError, match="throttled"):
        run_disable_alarm_scenario(config, cloudwatch)

    boto_client.put_metric_alarm.assert_called_once()
    boto_client.disable_alarm_actions.assert_not_called()
    boto_client.delete_alarms.assert_called_once_with(AlarmNames=["a1"])
