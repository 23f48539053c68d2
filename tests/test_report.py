import pytest

from kdiff.formatters import format_memory, format_percentage
from kdiff.quantity import cpu_millis, memory_bytes
from kdiff.report import (
    PodUsage,
    build_headers,
    build_row,
    is_running,
    pod_usage,
    render_table,
)
from kdiff.thresholds import Mode, default_thresholds


def _container(requests=None, limits=None):
    resources = {}
    if requests is not None:
        resources["requests"] = requests
    if limits is not None:
        resources["limits"] = limits
    return {"name": "app", "resources": resources}


def _pod(*containers, phase="Running"):
    return {"metadata": {"name": "web"}, "spec": {"containers": list(containers)}, "status": {"phase": phase}}


def _metrics(*usages):
    return {"containers": [{"name": "app", "usage": u} for u in usages]}


def test_is_running():
    assert is_running(_pod()) is True
    assert is_running(_pod(phase="Pending")) is False
    assert is_running({}) is False


def test_pod_usage_sums_requests_and_usage():
    pod = _pod(
        _container(requests={"cpu": "100m", "memory": "64Mi"}, limits={"cpu": "1", "memory": "1Gi"}),
        _container(requests={"cpu": "250m", "memory": "64Mi"}),
    )
    metrics = _metrics({"cpu": "10m", "memory": "10Mi"}, {"cpu": "5m", "memory": "20Mi"})
    usage = pod_usage(pod, metrics, "requests")
    assert usage.compared_cpu == cpu_millis("100m") + cpu_millis("250m")
    assert usage.compared_memory == 2 * memory_bytes("64Mi")
    assert usage.used_cpu == cpu_millis("10m") + cpu_millis("5m")
    assert usage.used_memory == memory_bytes("10Mi") + memory_bytes("20Mi")


def test_pod_usage_limits_mode_uses_limits():
    pod = _pod(_container(requests={"cpu": "100m"}, limits={"cpu": "2", "memory": "1Gi"}))
    usage = pod_usage(pod, _metrics({"cpu": "1", "memory": "1Gi"}), Mode.LIMITS)
    assert usage.compared_cpu == cpu_millis("2")
    assert usage.compared_memory == memory_bytes("1Gi")
    assert usage.mem_diff == 0.0
    assert usage.over_memory is False


def test_pod_usage_without_requests_has_no_comparison():
    usage = pod_usage(_pod(_container()), _metrics({"cpu": "10m", "memory": "1Mi"}), "requests")
    assert usage.compared_cpu == 0
    assert usage.compared_memory == 0
    assert not usage.cpu_has_comparison
    assert not usage.mem_has_comparison
    assert usage.cpu_diff == 0.0
    assert usage.over_cpu is False


def test_pod_usage_rejects_unknown_mode():
    with pytest.raises(ValueError):
        pod_usage(_pod(), _metrics(), "burst")


def test_over_usage_has_positive_difference():
    usage = PodUsage(compared_cpu=100, compared_memory=1000, used_cpu=150, used_memory=900)
    assert usage.over_cpu is True
    assert usage.cpu_diff > 0
    assert usage.over_memory is False
    assert usage.mem_diff < 0


def test_headers_full_requests():
    assert build_headers(False, "", "requests") == [
        "POD",
        "MEMORY REQUESTS",
        "USED MEMORY",
        "MEMORY DIFF (%)",
        "CPU REQUESTS",
        "USED CPU",
        "CPU DIFF (%)",
    ]


def test_headers_cpu_only_all_namespaces_limits():
    assert build_headers(True, "cpu", Mode.LIMITS) == [
        "NAMESPACE",
        "POD",
        "CPU LIMITS",
        "USED CPU",
        "CPU DIFF (%)",
    ]


def test_headers_unknown_filter_keeps_only_names():
    assert build_headers(False, "disk", "requests") == ["POD"]


@pytest.mark.parametrize("all_namespaces", [False, True])
@pytest.mark.parametrize("output_filter", ["", None, "cpu", "memory", "disk"])
def test_row_matches_headers(all_namespaces, output_filter):
    usage = PodUsage(100, 2048, 50, 1024)
    row = build_row("team-a", "web", usage, all_namespaces, output_filter, default_thresholds("requests"))
    assert len(row) == len(build_headers(all_namespaces, output_filter, "requests"))


def test_row_values():
    thresholds = default_thresholds("requests")
    usage = PodUsage(compared_cpu=100, compared_memory=2048, used_cpu=50, used_memory=0)
    row = build_row("team-a", "web", usage, True, "", thresholds)
    assert row[:2] == ["team-a", "web"]
    assert row[2] == format_memory(2048)
    assert row[3] == "0"
    assert row[4] == format_percentage(usage.mem_diff, True, thresholds)
    assert row[5:7] == ["100m", "50m"]
    assert row[7] == format_percentage(usage.cpu_diff, True, thresholds)


def test_row_without_comparison_shows_inf():
    thresholds = default_thresholds("requests")
    usage = PodUsage(0, 0, 10, 10)
    row = build_row("team-a", "web", usage, False, "cpu", thresholds)
    assert row[-1] == format_percentage(0.0, False, thresholds)
    assert "inf%" in row[-1]


def test_render_table_holds_all_cells():
    headers = ["POD", "USED CPU"]
    rows = [["web", "10m"], ["database-0", "250m"]]
    text = render_table(headers, rows)
    for cell in headers + [c for row in rows for c in row]:
        assert cell in text
    lines = text.splitlines()
    assert len({len(line) for line in lines}) == 1
    assert text.index("web") < text.index("database-0")