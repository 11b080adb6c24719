import json
import locale
import re
from datetime import datetime
from typing import Any, Final

from .errors import DecodeError
from .vswhere_types import Catalog, Installation, Properties

# (JSON key, attribute name, expected type)
_INSTALLATION_FIELDS: Final[tuple[tuple[str, str, type], ...]] = (
    ("instanceId", "instance_id", str),
    ("installDate", "install_date", datetime),
    ("installationName", "installation_name", str),
    ("installationPath", "installation_path", str),
    ("installationVersion", "installation_version", str),
    ("productId", "product_id", str),
    ("productPath", "product_path", str),
    ("state", "state", int),
    ("isComplete", "is_complete", bool),
    ("isLaunchable", "is_launchable", bool),
    ("isPrerelease", "is_prerelease", bool),
    ("isRebootRequired", "is_reboot_required", bool),
    ("displayName", "display_name", str),
    ("description", "description", str),
    ("channelId", "channel_id", str),
    ("channelUri", "channel_uri", str),
    ("enginePath", "engine_path", str),
    ("releaseNotes", "release_notes", str),
    ("thirdPartyNotices", "third_party_notices", str),
    ("updateDate", "update_date", datetime),
)

_CATALOG_FIELDS: Final[tuple[tuple[str, str, type], ...]] = (
    ("buildBranch", "build_branch", str),
    ("buildVersion", "build_version", str),
    ("id", "id", str),
    ("localBuild", "local_build", str),
    ("manifestName", "manifest_name", str),
    ("manifestType", "manifest_type", str),
    ("productDisplayVersion", "product_display_version", str),
    ("productLine", "product_line", str),
    ("productLineVersion", "product_line_version", str),
    ("productMilestone", "product_milestone", str),
    ("productMilestoneIsPreRelease", "product_milestone_is_prerelease", str),
    ("productName", "product_name", str),
    ("productPatchVersion", "product_patch_version", str),
    (
        "productPreReleaseMilestoneSuffix",
        "product_prerelease_milestone_suffix",
        str,
    ),
    ("productSemanticVersion", "product_semantic_version", str),
    ("requiredEngineVersion", "required_engine_version", str),
)

_PROPERTIES_FIELDS: Final[tuple[tuple[str, str, type], ...]] = (
    ("campaignId", "campaign_id", str),
    ("channelManifestId", "channel_manifest_id", str),
    ("nickname", "nickname", str),
    ("setupEngineFilePath", "setup_engine_file_path", str),
)

_FRACTION_RE: Final[re.Pattern[str]] = re.compile(r"\.(\d+)")


def decode_output(data: bytes) -> str:
    """Decodes process output bytes with a small encoding fallback list.

    vswhere writes in the console code page unless asked for UTF-8, so the
    locale's preferred encoding is tried after UTF-8.

    Args:
        data: Raw bytes to decode.

    Returns:
        Decoded text.
    """
    for enc in ("utf-8", locale.getpreferredencoding(False)):
        try:
            return data.decode(enc)
        except (UnicodeDecodeError, LookupError):
            continue
    return data.decode("utf-8", errors="replace")


def _parse_timestamp(key: str, value: str) -> datetime:
    # fromisoformat() on 3.10 rejects "Z" and fractions other than 3 or 6 digits.
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise DecodeError(f"field {key!r}: invalid timestamp {value!r}") from e
    if parsed.tzinfo is None:
        raise DecodeError(f"field {key!r}: timestamp {value!r} has no UTC offset")
    return parsed


def _convert(key: str, value: Any, kind: type) -> Any:
    if kind is datetime:
        if not isinstance(value, str):
            raise DecodeError(f"field {key!r}: expected timestamp string, got {value!r}")
        return _parse_timestamp(key, value)
    if kind is int:
        # bool is a subclass of int; JSON true/false is not a number here.
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise DecodeError(f"field {key!r}: expected unsigned integer, got {value!r}")
        return value
    if not isinstance(value, kind):
        raise DecodeError(f"field {key!r}: expected {kind.__name__}, got {value!r}")
    return value


def _read_fields(
    obj: Any, fields: tuple[tuple[str, str, type], ...], where: str
) -> dict[str, Any]:
    """Collects dataclass keyword arguments from one JSON object.

    Missing and null keys are left out so the dataclass default applies.
    Unknown keys are ignored.
    """
    if not isinstance(obj, dict):
        raise DecodeError(f"{where}: expected JSON object, got {type(obj).__name__}")

    kwargs: dict[str, Any] = {}
    for key, attr, kind in fields:
        value = obj.get(key)
        if value is None:
            continue
        kwargs[attr] = _convert(f"{where}.{key}", value, kind)
    return kwargs


def _parse_installation(obj: Any, index: int) -> Installation:
    where = f"[{index}]"
    kwargs = _read_fields(obj, _INSTALLATION_FIELDS, where)

    catalog = obj.get("catalog")
    if catalog is not None:
        kwargs["catalog"] = Catalog(
            **_read_fields(catalog, _CATALOG_FIELDS, f"{where}.catalog")
        )

    properties = obj.get("properties")
    if properties is not None:
        kwargs["properties"] = Properties(
            **_read_fields(properties, _PROPERTIES_FIELDS, f"{where}.properties")
        )

    return Installation(**kwargs)


def parse_installations(text: str) -> list[Installation]:
    """Parses `vswhere -format json` output into installations.

    Args:
        text: vswhere stdout text.

    Returns:
        Installations in the order vswhere printed them (possibly empty).

    Raises:
        DecodeError: If the text is not JSON or any record has an unexpected
            shape. No partial result is returned.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"failed parsing output of vswhere: {e}") from e

    # A bare null means no installations.
    if data is None:
        return []

    if not isinstance(data, list):
        raise DecodeError(
            f"failed parsing output of vswhere: expected JSON array, got {type(data).__name__}"
        )

    return [_parse_installation(item, i) for i, item in enumerate(data)]
