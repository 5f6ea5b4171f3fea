from __future__ import annotations
import os

# AWS session
REGION = os.environ.get("NGRAMMINER_REGION", "us-east-1")
PROFILE = os.environ.get("NGRAMMINER_PROFILE")  # None: default credential chain

# EMR job flow
RELEASE_LABEL = os.environ.get("NGRAMMINER_RELEASE_LABEL", "emr-4.2.0")
JOB_FLOW_NAME = RELEASE_LABEL.upper()
SERVICE_ROLE = os.environ.get("NGRAMMINER_SERVICE_ROLE", "EMR_DefaultRole")
JOB_FLOW_ROLE = os.environ.get("NGRAMMINER_JOB_FLOW_ROLE", "EMR_EC2_DefaultRole")
APPLICATIONS = ("Hive", "Hadoop")
HIVE_INPUT_FORMAT = "org.apache.hadoop.hive.ql.io.HiveInputFormat"
MIN_SPLIT_SIZE = 134217728  # 128Mb
MAX_STEPS = 256

# Staging bucket layout (one bucket per run)
BUCKET_PREFIX = os.environ.get("NGRAMMINER_BUCKET_PREFIX", "ana-")
SCRIPTS_PREFIX = "EMR/HiveScripts/"
OUTPUT_PREFIX = "EMR/Output/"
LOGS_PREFIX = "EMR/Logs/"

# Public Google Books n-grams corpus
CORPUS_BUCKET = "datasets.elasticmapreduce"
CORPUS_PREFIX = "ngrams/books/20090715/"
CORPUS_ROOT = f"s3://{CORPUS_BUCKET}/{CORPUS_PREFIX}"
NGRAM_SIZE = "1gram"

# Lowercase words, optionally two of them joined by a hyphen.
# Escaped once for the step arguments and once for the Hive string literal.
GRAM_REGEX = r"^\\\p{Ll}+(\\\-)?\\\p{Ll}+$"

# Run parameter bounds
MIN_YEAR = 1700
MAX_YEAR = 2008
MIN_PERCENT_OF_YEARS = 0.1
MAX_PERCENT_OF_YEARS = 1.0
MIN_CLUSTER_SIZE = 1
MAX_CLUSTER_SIZE = 20

# Instance types offered in the menus. Check the EMR documentation for the
# types supported by the selected release label.
INSTANCE_TYPES = (
    "c1.medium",
    "c1.xlarge",
    "c3.2xlarge",
    "c3.4xlarge",
    "c3.8xlarge",
    "c3.xlarge",
    "c4.2xlarge",
    "c4.4xlarge",
    "c4.8xlarge",
    "c4.large",
    "c4.xlarge",
    "d2.2xlarge",
    "d2.4xlarge",
    "d2.8xlarge",
    "d2.xlarge",
    "i2.2xlarge",
    "i2.4xlarge",
    "i2.8xlarge",
    "i2.xlarge",
    "m1.large",
    "m1.medium",
    "m1.small",
    "m1.xlarge",
    "m2.2xlarge",
    "m2.4xlarge",
    "m2.xlarge",
    "m3.2xlarge",
    "m3.large",
    "m3.medium",
    "m3.xlarge",
    "m4.10xlarge",
    "m4.2xlarge",
    "m4.4xlarge",
    "m4.large",
    "m4.xlarge",
    "r3.2xlarge",
    "r3.4xlarge",
    "r3.8xlarge",
    "r3.large",
    "r3.xlarge",
)
