"""
Arweave asset upload for odyssey tokens.

Asset directory layout:
    <asset_dir>/images/<token_no>.<ext>     token artwork (0 is the placeholder)
    <asset_dir>/metadata/<token_no>.json    optional base metadata

upload_token() uploads the image, then a metadata JSON pointing at it, and
returns the metadata URI. Transactions are signed with the JWK wallet at
key_file_path. Uploads are blocking; async callers run them in a thread.
"""

from __future__ import annotations

import json
import mimetypes
import random
from pathlib import Path
from typing import Any, Callable

from odyssey_gateway.logging import get_logger

logger = get_logger(__name__)

ARWEAVE_GATEWAY_URL = "https://arweave.net"
IMAGES_DIR = "images"
METADATA_DIR = "metadata"
IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg")

# (key_file_path, data, content_type) -> transaction id
SendFn = Callable[[str, bytes, str], str]


def _send_with_arweave(key_file_path: str, data: bytes, content_type: str) -> str:
    """Sign and post one data transaction with arweave-python-client."""
    import arweave

    wallet = arweave.Wallet(key_file_path)
    tx = arweave.Transaction(wallet, data=data)
    tx.add_tag("Content-Type", content_type)
    tx.sign()
    tx.send()
    return tx.id


def _list_images(images_dir: Path) -> list[Path]:
    if not images_dir.is_dir():
        return []
    return sorted(p for p in images_dir.iterdir() if p.suffix.lower() in IMAGE_SUFFIXES)


def pick_image(asset_dir: str | Path, token_no: int | str, random_trait: bool = False) -> Path:
    """
    Image file for token_no. With random_trait, any image in the directory may be
    chosen. Raises FileNotFoundError when nothing matches.
    """
    images = _list_images(Path(asset_dir) / IMAGES_DIR)
    if not images:
        raise FileNotFoundError(f"No images under {Path(asset_dir) / IMAGES_DIR}")
    if random_trait:
        return random.choice(images)
    for image in images:
        if image.stem == str(token_no):
            return image
    raise FileNotFoundError(f"No image for token {token_no} under {Path(asset_dir) / IMAGES_DIR}")


def load_base_metadata(asset_dir: str | Path, token_no: int | str) -> dict[str, Any]:
    path = Path(asset_dir) / METADATA_DIR / f"{token_no}.json"
    if not path.is_file():
        return {}
    return json.loads(path.read_text(encoding="utf-8"))


class ArweaveUploader:
    """Upload token image + metadata to Arweave. send is injectable for tests."""

    def __init__(self, send: SendFn | None = None, gateway_url: str = ARWEAVE_GATEWAY_URL) -> None:
        self._send = send or _send_with_arweave
        self.gateway_url = gateway_url.rstrip("/")

    def uri_for(self, tx_id: str) -> str:
        return f"{self.gateway_url}/{tx_id}"

    def upload_token(
        self,
        token_no: int | str,
        asset_dir: str,
        key_file_path: str,
        *,
        random_trait: bool = False,
        name: str | None = None,
        description: str | None = None,
    ) -> str:
        image = pick_image(asset_dir, token_no, random_trait)
        content_type = mimetypes.guess_type(image.name)[0] or "application/octet-stream"
        image_id = self._send(key_file_path, image.read_bytes(), content_type)
        logger.info("arweave_image_uploaded", token_no=str(token_no), image=image.name, tx_id=image_id)

        metadata = load_base_metadata(asset_dir, token_no)
        metadata["image"] = self.uri_for(image_id)
        if name is not None:
            metadata["name"] = name
        if description is not None:
            metadata["description"] = description
        metadata_id = self._send(key_file_path, json.dumps(metadata).encode("utf-8"), "application/json")
        logger.info("arweave_metadata_uploaded", token_no=str(token_no), tx_id=metadata_id)
        return self.uri_for(metadata_id)
