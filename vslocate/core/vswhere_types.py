from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Catalog:
    """Build and product metadata of an installation.

    Values are passed through from vswhere as-is.
    """

    build_branch: str = ""
    build_version: str = ""
    id: str = ""
    local_build: str = ""
    manifest_name: str = ""
    manifest_type: str = ""
    product_display_version: str = ""
    product_line: str = ""
    product_line_version: str = ""
    product_milestone: str = ""
    product_milestone_is_prerelease: str = ""
    product_name: str = ""
    product_patch_version: str = ""
    product_prerelease_milestone_suffix: str = ""
    product_semantic_version: str = ""
    required_engine_version: str = ""


@dataclass(frozen=True, slots=True)
class Properties:
    """Free-form properties of an installation."""

    campaign_id: str = ""
    channel_manifest_id: str = ""
    nickname: str = ""
    setup_engine_file_path: str = ""


@dataclass(frozen=True, slots=True)
class Installation:
    """Represents an installed instance of Visual Studio.

    Attributes:
        instance_id: Stable identifier of the instance.
        install_date: When the instance was installed (None for legacy products).
        installation_path: Root directory of the instance.
        installation_version: Full version string (e.g. "17.8.34330.188").
        state: Bit flags describing which parts of the instance are registered.
        update_date: When the instance was last updated, if known.
        catalog: Build metadata.
        properties: Free-form string properties.
    """

    instance_id: str = ""
    install_date: datetime | None = None
    installation_name: str = ""
    installation_path: str = ""
    installation_version: str = ""
    product_id: str = ""
    product_path: str = ""
    state: int = 0
    is_complete: bool = False
    is_launchable: bool = False
    is_prerelease: bool = False
    is_reboot_required: bool = False
    display_name: str = ""
    description: str = ""
    channel_id: str = ""
    channel_uri: str = ""
    engine_path: str = ""
    release_notes: str = ""
    third_party_notices: str = ""
    update_date: datetime | None = None
    catalog: Catalog = field(default_factory=Catalog)
    properties: Properties = field(default_factory=Properties)
