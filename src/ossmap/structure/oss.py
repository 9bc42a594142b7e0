"""Alibaba Cloud OSS adapter for the listing protocol."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

import oss2
from pydantic import BaseModel, Field

from ossmap.structure.listing import ListedObject, ListingPage

ENV_ACCESS_KEY_ID = "OSS_ACCESS_KEY_ID"
ENV_ACCESS_KEY_SECRET = "OSS_ACCESS_KEY_SECRET"
ENV_ENDPOINT = "OSS_ENDPOINT"


class OssCredentials(BaseModel):
    """Access credentials and endpoint for an OSS account.

    Attributes
    ----------
    access_key_id
        Access key identifier.
    access_key_secret
        Access key secret.
    endpoint
        Endpoint host without scheme (e.g. ``oss-cn-hangzhou.aliyuncs.com``).
    """

    access_key_id: str = Field(min_length=1)
    access_key_secret: str = Field(min_length=1, repr=False)
    endpoint: str = Field(min_length=1)

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> OssCredentials:
        """Read credentials from ``OSS_*`` environment variables.

        Raises
        ------
        ValueError
            If any variable is missing or empty.
        """
        env = os.environ if environ is None else environ
        names = (ENV_ACCESS_KEY_ID, ENV_ACCESS_KEY_SECRET, ENV_ENDPOINT)
        missing = [name for name in names if not env.get(name)]
        if missing:
            raise ValueError(f"Missing OSS environment variables: {', '.join(missing)}")
        return cls(
            access_key_id=env[ENV_ACCESS_KEY_ID],
            access_key_secret=env[ENV_ACCESS_KEY_SECRET],
            endpoint=env[ENV_ENDPOINT],
        )


class OssListingClient:
    """Listing client backed by an ``oss2.Bucket``.

    Retries are left to the SDK; errors propagate to the scanner.
    """

    def __init__(self, bucket: Any) -> None:
        self._bucket = bucket

    @classmethod
    def from_credentials(cls, credentials: OssCredentials, bucket_name: str) -> OssListingClient:
        """Create a client for ``bucket_name`` over HTTPS."""
        auth = oss2.Auth(credentials.access_key_id, credentials.access_key_secret)
        endpoint = credentials.endpoint
        if "://" not in endpoint:
            endpoint = f"https://{endpoint}"
        return cls(oss2.Bucket(auth, endpoint, bucket_name))

    def list_objects(
        self,
        prefix: str,
        delimiter: str,
        max_keys: int,
        continuation_token: str | None = None,
    ) -> ListingPage:
        result = self._bucket.list_objects(
            prefix=prefix,
            delimiter=delimiter,
            marker=continuation_token or "",
            max_keys=max_keys,
        )
        objects = [
            ListedObject(
                key=info.key,
                size=int(info.size or 0),
                last_modified=_to_datetime(info.last_modified),
            )
            for info in result.object_list
        ]
        return ListingPage(
            objects=objects,
            common_prefixes=list(result.prefix_list),
            next_continuation_token=result.next_marker or None,
            is_truncated=bool(result.is_truncated),
        )


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if value is None:
        return datetime.fromtimestamp(0, tz=timezone.utc)
    return datetime.fromtimestamp(int(value), tz=timezone.utc)
