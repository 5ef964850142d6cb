from core.system_utils import format_report, get_system_info


def test_system_info_snapshot():
    info = get_system_info()
    for key in ("OS", "Hostname", "User", "CPU Cores (logical)", "RAM (GB)", "Boot Time", "Python Version"):
        assert key in info
    assert info["RAM (GB)"] > 0
    assert info["CPU Cores (logical)"] >= 1


def test_format_report_aligns_keys():
    text = format_report({"OS": "Linux", "Hostname": "box", "Processor": None})
    assert text.splitlines() == [
        "OS        : Linux",
        "Hostname  : box",
        "Processor : ",
    ]


def test_format_report_empty():
    assert format_report({}) == ""
