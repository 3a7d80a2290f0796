from .access import CdnBucketAccess, PublicBucketAccess, cdn_read_policy
from .assets import content_type_for, crawl_directory, resolve_site_root, upload_assets
from .site_buckets import SiteBuckets, SiteBucketsArgs
