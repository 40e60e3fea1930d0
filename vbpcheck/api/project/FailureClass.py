"""Buckets a referenced-file parse failure can land in."""

from enum import Enum


class FailureClass(Enum):
    ENCODING_ANOMALY = "encoding_anomaly"
    GENERIC_PARSE_FAILURE = "generic_parse_failure"
