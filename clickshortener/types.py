from datetime import datetime
from typing import Any
from collections.abc import Callable

from botocore.client import BaseClient


# Type aliases for Python dictionaries
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type LambdaResponse = dict[str, Any]
type LambdaConfiguration = dict[str, Any]

# Type aliases for boto3 clients
type AppConfigDataClient = BaseClient

# Injectable sources of time and identity
type Clock = Callable[[], datetime]
type IdFactory = Callable[[], str]
