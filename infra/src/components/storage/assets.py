from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Iterator, List, Sequence

import pulumi
import pulumi_aws as aws
import pulumi_synced_folder as synced_folder

from utils.logging import get_logger

logger = get_logger()

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def crawl_directory(root: Path) -> Iterator[Path]:
    """Every regular file below `root`, recursively. Doesn't handle symlink cycles."""
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            yield from crawl_directory(entry)
        elif entry.is_file():
            yield entry


def content_type_for(path: Path) -> str:
    return mimetypes.guess_type(path.name)[0] or DEFAULT_CONTENT_TYPE


def resolve_site_root(folder_path: str) -> Path:
    root = Path.cwd() / folder_path
    if not root.is_dir():
        raise FileNotFoundError(f"Website contents directory not found: {root}")
    return root


def upload_assets(
    name: str,
    bucket: aws.s3.Bucket,
    folder_path: str,
    *,
    acl: str,
    depends_on: Sequence[pulumi.Resource] = (),
    sync_each_file: bool = False,
) -> List[pulumi.Resource]:
    """
    Upload the local website folder into `bucket`.

    sync_each_file=True declares one BucketObject per file (key = relative
    path); otherwise the folder is managed as a whole by S3BucketFolder.
    """
    root = resolve_site_root(folder_path)

    if not sync_each_file:
        folder = synced_folder.S3BucketFolder(
            f"{name}-folder",
            path=str(root),
            bucket_name=bucket.bucket,
            acl=acl,
            opts=pulumi.ResourceOptions(depends_on=list(depends_on)),
        )
        return [folder]

    logger.info("Syncing contents from local disk", extra={"path": str(root)})
    objects = []
    for file_path in crawl_directory(root):
        key = file_path.relative_to(root).as_posix()
        objects.append(aws.s3.BucketObject(
            key,
            key=key,
            bucket=bucket.bucket,
            acl=acl,
            content_type=content_type_for(file_path),
            source=pulumi.FileAsset(str(file_path)),
            opts=pulumi.ResourceOptions(parent=bucket, depends_on=list(depends_on)),
        ))
    return objects
