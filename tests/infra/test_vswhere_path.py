import os

from vslocate.infra.vswhere_path import find_vswhere_executable


def test_find_vswhere_executable_joins_program_files(monkeypatch) -> None:
    monkeypatch.setenv("ProgramFiles(x86)", "C:/Program Files (x86)")

    assert find_vswhere_executable() == os.path.join(
        "C:/Program Files (x86)", "Microsoft Visual Studio", "Installer", "vswhere.exe"
    )


def test_find_vswhere_executable_is_relative_when_env_missing(monkeypatch) -> None:
    monkeypatch.delenv("ProgramFiles(x86)", raising=False)

    path = find_vswhere_executable()

    assert path == os.path.join("Microsoft Visual Studio", "Installer", "vswhere.exe")
    assert not os.path.isabs(path)
