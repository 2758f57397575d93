from medialibrary.common.strings.splitters import csv_to_list


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_passes_sequences_through():
    assert csv_to_list(["GET", " POST ", ""]) == ["GET", "POST"]
    assert csv_to_list(("*",)) == ["*"]


def test_csv_to_list_splits_env_strings():
    assert csv_to_list("http://localhost:4200, https://app.example.org,,") == [
        "http://localhost:4200",
        "https://app.example.org",
    ]
