from .manifest import MANIFEST_FILE, manifest_path, read_manifest

__all__ = [
    "MANIFEST_FILE",
    "manifest_path",
    "read_manifest",
]
