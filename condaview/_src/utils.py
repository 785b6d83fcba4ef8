from pathlib import PurePath


def get_name_from_prefix(prefix: str) -> str:
    """This function assumes an environment name is the last segment of a conda prefix.

    Prefixes without a final segment (eg. "/") are returned unchanged.
    """
    name = PurePath(prefix).name
    return name or prefix


def decode_output(data: bytes) -> str:
    """Decode captured process output, replacing invalid bytes"""
    return data.decode("utf-8", errors="replace").strip()
