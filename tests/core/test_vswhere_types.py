from dataclasses import FrozenInstanceError

import pytest

from vslocate.core.vswhere_types import Catalog, Installation, Properties


def test_installation_defaults_are_empty() -> None:
    install = Installation()

    assert install.instance_id == ""
    assert install.install_date is None
    assert install.update_date is None
    assert install.state == 0
    assert install.is_complete is False
    assert install.catalog == Catalog()
    assert install.properties == Properties()


def test_installations_with_same_fields_are_equal() -> None:
    a = Installation(instance_id="abc123", installation_path="C:/VS/Community")
    b = Installation(instance_id="abc123", installation_path="C:/VS/Community")

    assert a == b


def test_vswhere_types_are_frozen_dataclasses() -> None:
    install = Installation(instance_id="abc123")

    with pytest.raises(FrozenInstanceError):
        install.instance_id = "changed"  # type: ignore[misc]
