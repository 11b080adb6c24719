import json

import pytest

COMMUNITY_2022 = {
    "instanceId": "a1b2c3d4",
    "installDate": "2023-11-15T08:32:12Z",
    "installationName": "VisualStudio/17.8.3+34330.188",
    "installationPath": "C:\\Program Files\\Microsoft Visual Studio\\2022\\Community",
    "installationVersion": "17.8.34330.188",
    "productId": "Microsoft.VisualStudio.Product.Community",
    "productPath": "C:\\Program Files\\Microsoft Visual Studio\\2022\\Community\\Common7\\IDE\\devenv.exe",
    "state": 4294967295,
    "isComplete": True,
    "isLaunchable": True,
    "isPrerelease": False,
    "isRebootRequired": False,
    "displayName": "Visual Studio Community 2022",
    "description": "Powerful IDE, free for students, open-source contributors, and individuals",
    "channelId": "VisualStudio.17.Release",
    "channelUri": "https://aka.ms/vs/17/release/channel",
    "enginePath": "C:\\Program Files (x86)\\Microsoft Visual Studio\\Installer\\resources\\app\\ServiceHub\\Services\\Microsoft.VisualStudio.Setup.Service",
    "releaseNotes": "https://docs.microsoft.com/en-us/visualstudio/releases/2022/release-notes-v17.8#17.8.3",
    "thirdPartyNotices": "https://go.microsoft.com/fwlink/?LinkId=661288",
    "updateDate": "2023-12-13T10:01:44.1234567Z",
    "catalog": {
        "buildBranch": "d17.8",
        "buildVersion": "17.8.34330.188",
        "id": "VisualStudio/17.8.3+34330.188",
        "localBuild": "build-lab",
        "manifestName": "VisualStudio",
        "manifestType": "installer",
        "productDisplayVersion": "17.8.3",
        "productLine": "Dev17",
        "productLineVersion": "2022",
        "productMilestone": "RTW",
        "productMilestoneIsPreRelease": "False",
        "productName": "Visual Studio",
        "productPatchVersion": "3",
        "productPreReleaseMilestoneSuffix": "1.0",
        "productSemanticVersion": "17.8.3+34330.188",
        "requiredEngineVersion": "3.8.2112.61926",
    },
    "properties": {
        "campaignId": "",
        "channelManifestId": "VisualStudio.17.Release/17.8.3+34330.188",
        "nickname": "",
        "setupEngineFilePath": "C:\\Program Files (x86)\\Microsoft Visual Studio\\Installer\\setup.exe",
    },
}

BUILD_TOOLS_2019 = {
    "instanceId": "e5f6a7b8",
    "installDate": "2021-03-04T20:03:11Z",
    "installationPath": "C:\\Program Files (x86)\\Microsoft Visual Studio\\2019\\BuildTools",
    "installationVersion": "16.11.34301.259",
    "productId": "Microsoft.VisualStudio.Product.BuildTools",
    "state": 4294967295,
    "isComplete": True,
    "isLaunchable": False,
    "isPrerelease": False,
    "displayName": "Visual Studio Build Tools 2019",
    "catalog": {"productDisplayVersion": "16.11.32"},
}


@pytest.fixture
def vswhere_records() -> list[dict]:
    """Two records as printed by `vswhere -all -format json`."""
    return [dict(COMMUNITY_2022), dict(BUILD_TOOLS_2019)]


@pytest.fixture
def vswhere_stdout(vswhere_records: list[dict]) -> bytes:
    return json.dumps(vswhere_records, indent=2).encode("utf-8")
