"""
Constants for the CRI (Container Runtime Interface) log line format.

CRI log format example:
    2016-10-06T00:17:09.669794202Z stdout P log content 1
    2016-10-06T00:17:09.669794203Z stderr F log content 2

See: https://github.com/kubernetes/kubernetes/blob/master/pkg/kubelet/kuberuntime/logs/logs.go
"""

# =============================================================================
# Stream Tokens
# =============================================================================

# Second field of every line, matched case-sensitively
STREAM_STDOUT = "stdout"
STREAM_STDERR = "stderr"

# =============================================================================
# Log Tags
# =============================================================================

# Third field of every line. The kubelet splits long lines into several
# entries tagged P, with the final one tagged F.
TAG_FULL = "F"
TAG_PARTIAL = "P"

# =============================================================================
# Message Reconstruction
# =============================================================================

# Remaining tokens are rejoined with this separator (original spacing is lost)
MESSAGE_SEPARATOR = " "

# =============================================================================
# Timestamps and Errors
# =============================================================================

# CRI runtimes write RFC 3339 timestamps with nanosecond fractions
NANOSECOND_DIGITS = 9
NANOS_PER_SECOND = 1_000_000_000

# RFC 3339 allows second 60 for leap seconds
LEAP_SECOND = 60

# Offending values longer than this are truncated in error messages
MAX_ERROR_VALUE_LENGTH = 100
