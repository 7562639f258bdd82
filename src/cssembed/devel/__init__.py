"""Development-time serving of stylesheets and the files they reference."""

from cssembed.devel.resolver import (
    decode_resource_token,
    devel_extra_files,
    encode_resource_token,
    guess_mime_type,
)
from cssembed.devel.rewrite import (
    devel_bg_img_b64,
    devel_pass_through,
    rewrite_background_images,
    source_directory,
)

__all__ = [
    "rewrite_background_images",
    "devel_pass_through",
    "devel_bg_img_b64",
    "source_directory",
    "devel_extra_files",
    "encode_resource_token",
    "decode_resource_token",
    "guess_mime_type",
]
