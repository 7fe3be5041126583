"""
Query Families.

Each family wraps one area of the queue service API. Run-scoped families
take their path prefix from a callback installed at setup time; package
queries talk to the cluster package manager and have no prefix.
"""

from queue_cli.queries.base import BaseQueries, PrefixCallback, default_prefix
from queue_cli.queries.config import ConfigQueries
from queue_cli.queries.endpoints import EndpointsQueries
from queue_cli.queries.package import PackageQueries
from queue_cli.queries.plan import PlanQueries
from queue_cli.queries.pod import PodQueries
from queue_cli.queries.state import StateQueries

__all__ = [
    "BaseQueries",
    "ConfigQueries",
    "EndpointsQueries",
    "PackageQueries",
    "PlanQueries",
    "PodQueries",
    "PrefixCallback",
    "StateQueries",
    "default_prefix",
]
