"""Setup configuration for the AWS Snippets package."""

from setuptools import setup, find_packages

# Read the README file for the long description
try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "AWS Snippets - single-purpose CloudWatch and SQS programs with self-cleaning scenarios"

setup(
    name="aws-snippets",
    version="1.0.0",
    author="AWS Snippets",
    description="Single-purpose CloudWatch and SQS programs with self-cleaning scenarios",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "boto3>=1.26.0",
        "botocore>=1.29.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "moto>=5.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
            "mypy>=0.991",
        ],
    },
    entry_points={
        "console_scripts": [
            "aws-create-custom-metric=aws_snippets.cli.create_custom_metric:main",
            "aws-configure-dlq=aws_snippets.cli.configure_dead_letter_queue:main",
            "aws-get-queue-url=aws_snippets.cli.get_queue_url:main",
            "aws-enable-alarm=aws_snippets.cli.enable_alarm:main",
            "aws-disable-alarm=aws_snippets.cli.disable_alarm:main",
            "aws-delete-alarm=aws_snippets.cli.delete_alarm:main",
            "aws-snippets-scenario=aws_snippets.cli.run_scenario:main",
        ],
    },
)
