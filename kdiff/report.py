"""Comparison of pod usage with requests or limits, and the table that shows it."""

from __future__ import annotations

from dataclasses import dataclass

from tabulate import tabulate

from kdiff.formatters import format_memory, format_percentage
from kdiff.quantity import cpu_millis, memory_bytes
from kdiff.thresholds import Mode


def _diff(used: int, compared: int) -> float:
    return (used - compared) / compared * 100 if compared > 0 else 0.0


@dataclass(frozen=True)
class PodUsage:
    """Summed CPU (millicores) and memory (bytes) of a pod, compared and used."""

    compared_cpu: int
    compared_memory: int
    used_cpu: int
    used_memory: int

    cpu_has_comparison = property(lambda self: self.compared_cpu > 0)
    mem_has_comparison = property(lambda self: self.compared_memory > 0)
    cpu_diff = property(lambda self: _diff(self.used_cpu, self.compared_cpu))
    mem_diff = property(lambda self: _diff(self.used_memory, self.compared_memory))
    over_cpu = property(lambda self: self.cpu_has_comparison and self.used_cpu > self.compared_cpu)
    over_memory = property(
        lambda self: self.mem_has_comparison and self.used_memory > self.compared_memory
    )


def pod_usage(pod: dict, metrics: dict, mode) -> PodUsage:
    """Sum a pod's requests or limits and its measured usage over all containers."""
    key = Mode(mode).value
    bounds = [(c.get("resources") or {}).get(key) or {} for c in (pod.get("spec") or {}).get("containers") or []]
    usages = [c.get("usage") or {} for c in metrics.get("containers") or []]

    def total(items, name, convert):
        return sum(convert(str(item.get(name) or "0")) for item in items)

    return PodUsage(
        total(bounds, "cpu", cpu_millis),
        total(bounds, "memory", memory_bytes),
        total(usages, "cpu", cpu_millis),
        total(usages, "memory", memory_bytes),
    )


def is_running(pod: dict) -> bool:
    """Tell whether the pod is in the Running phase."""
    return (pod.get("status") or {}).get("phase") == "Running"


def build_headers(all_namespaces, output_filter, mode) -> list[str]:
    """Return the table's column headers."""
    label = Mode(mode).value.upper()
    headers = ["NAMESPACE", "POD"] if all_namespaces else ["POD"]
    if output_filter in ("", None, "memory"):
        headers += [f"MEMORY {label}", "USED MEMORY", "MEMORY DIFF (%)"]
    if output_filter in ("", None, "cpu"):
        headers += [f"CPU {label}", "USED CPU", "CPU DIFF (%)"]
    return headers


def build_row(namespace, pod_name, usage: PodUsage, all_namespaces, output_filter, thresholds) -> list[str]:
    """Return one table row for a pod, matching build_headers' columns."""
    row = [namespace, pod_name] if all_namespaces else [pod_name]
    if output_filter in ("", None, "memory"):
        row += [
            format_memory(usage.compared_memory),
            format_memory(usage.used_memory),
            format_percentage(usage.mem_diff, usage.mem_has_comparison, thresholds),
        ]
    if output_filter in ("", None, "cpu"):
        row += [
            f"{usage.compared_cpu}m",
            f"{usage.used_cpu}m",
            format_percentage(usage.cpu_diff, usage.cpu_has_comparison, thresholds),
        ]
    return row


def render_table(headers, rows) -> str:
    """Render the rows as a boxed text table."""
    return tabulate([list(r) for r in rows], headers=list(headers), tablefmt="simple_grid", disable_numparse=True)