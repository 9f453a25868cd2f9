"""Amazon CloudWatch operations: custom metrics and EC2 CPU alarms."""

from .base import AWSServiceClient

ALARM_NAMESPACE = "AWS/EC2"
ALARM_METRIC_NAME = "CPUUtilization"
ALARM_THRESHOLD = 70.0
ALARM_PERIOD_SECONDS = 60
ALARM_DESCRIPTION = "Alarm when server CPU exceeds 70%"


class CloudWatchClient(AWSServiceClient):
    """Thin wrappers around CloudWatch PutMetricData and the alarm APIs."""

    service_name = "cloudwatch"

    def create_custom_metric(
        self,
        namespace: str,
        metric_name: str,
        unit: str,
        value: float,
        dimension_name: str,
        dimension_value: str,
    ) -> None:
        """Publish one data point for a custom metric.

        Args:
            namespace: Metric namespace, e.g. "SITE/TRAFFIC"
            metric_name: Name of the metric, e.g. "UniqueVisitors"
            unit: What the value represents, e.g. "Count"
            value: Value of the data point
            dimension_name: Name of the single dimension, e.g. "SiteName"
            dimension_value: Value of that dimension
        """
        self.get_client().put_metric_data(
            Namespace=namespace,
            MetricData=[
                {
                    "MetricName": metric_name,
                    "Unit": unit,
                    "Value": value,
                    "Dimensions": [
                        {"Name": dimension_name, "Value": dimension_value},
                    ],
                }
            ],
        )
        self.logger.info(
            f"Published metric {metric_name}",
            namespace=namespace,
            value=value,
            unit=unit,
        )

    def reboot_action_arn(self) -> str:
        """EC2 reboot action for alarms in this client's region."""
        return f"arn:aws:automate:{self.get_client().meta.region_name}:ec2:reboot"

    def put_alarm(self, alarm_name: str, instance_name: str, instance_id: str) -> str:
        """Create a CPU-utilisation alarm for an instance.

        The alarm reboots the instance when average CPU exceeds 70% over one
        60 second period.

        Returns:
            The alarm name, which is also the handle DeleteAlarms takes
        """
        self.get_client().put_metric_alarm(
            AlarmName=alarm_name,
            ComparisonOperator="GreaterThanThreshold",
            EvaluationPeriods=1,
            MetricName=ALARM_METRIC_NAME,
            Namespace=ALARM_NAMESPACE,
            Period=ALARM_PERIOD_SECONDS,
            Statistic="Average",
            Threshold=ALARM_THRESHOLD,
            ActionsEnabled=True,
            AlarmDescription=ALARM_DESCRIPTION,
            Unit="Seconds",
            AlarmActions=[self.reboot_action_arn()],
            Dimensions=[{"Name": "InstanceId", "Value": instance_id}],
        )
        self.logger.info(
            f"Created alarm {alarm_name} for instance {instance_name}",
            instance_id=instance_id,
        )
        return alarm_name

    def enable_alarm_actions(self, alarm_name: str) -> None:
        """Enable the actions of an existing alarm."""
        self.get_client().enable_alarm_actions(AlarmNames=[alarm_name])
        self.logger.info(f"Enabled alarm {alarm_name}")

    def enable_alarm(self, alarm_name: str, instance_name: str, instance_id: str) -> None:
        """Create a CPU-utilisation alarm for an instance and enable its actions."""
        self.put_alarm(alarm_name, instance_name, instance_id)
        self.enable_alarm_actions(alarm_name)

    def disable_alarm(self, alarm_name: str) -> None:
        """Disable the actions of an alarm."""
        self.get_client().disable_alarm_actions(AlarmNames=[alarm_name])
        self.logger.info(f"Disabled alarm {alarm_name}")

    def delete_alarm(self, alarm_name: str) -> None:
        """Delete an alarm."""
        self.get_client().delete_alarms(AlarmNames=[alarm_name])
        self.logger.info(f"Deleted alarm {alarm_name}")
