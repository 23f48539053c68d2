"""Command line entry point: compare pod usage with requests or limits."""

from __future__ import annotations

import argparse
import sys

from kdiff.help import show_help_menu
from kdiff.kube import KubeClient, KubeConfig, KubeError, default_kubeconfig_path
from kdiff.report import build_headers, build_row, is_running, pod_usage, render_table
from kdiff.thresholds import default_thresholds, validate_color_thresholds


def parse_args(argv=None) -> argparse.Namespace:
    """Parse the command's flags."""
    p = argparse.ArgumentParser(prog="kdiff", add_help=False, allow_abbrev=False)
    p.add_argument("-n", dest="namespace", default="")
    p.add_argument("-o", dest="output", default="")
    p.add_argument("--kubeconfig", "-kubeconfig", default="")
    p.add_argument("--context", "-context", default="")
    p.add_argument("-m", "--mode", "-mode", default="requests")
    p.add_argument("-d", dest="difference_only", action="store_true")
    p.add_argument("-a", "-A", dest="all_namespaces", action="store_true")
    p.add_argument("-i", "--ignore-unset", "-ignore-unset", dest="ignore_unset", action="store_true")
    p.add_argument("-h", dest="help", action="store_true")
    for colour in ("red", "yellow", "cyan"):
        p.add_argument(f"--color-{colour}", f"-color-{colour}", dest=f"color_{colour}", type=float)
    return p.parse_args(argv)


def _error(*lines: str) -> int:
    for line in lines:
        print(line, file=sys.stderr)
    return 1


def main(argv=None) -> int:
    """Run the command and return its exit status."""
    args = parse_args(argv)
    if args.help:
        show_help_menu("kdiff")
        return 0

    mode = args.mode.lower()
    if mode not in ("requests", "limits"):
        return _error(f"Error: mode must be 'requests' or 'limits', got '{mode}'")

    thresholds = default_thresholds(mode, args.color_red, args.color_yellow, args.color_cyan)
    try:
        validate_color_thresholds(thresholds)
    except ValueError as exc:
        return _error(f"Error: {exc}")

    try:
        config = KubeConfig.load(args.kubeconfig or default_kubeconfig_path(), args.context or None)
    except KubeError as exc:
        return _error(f"Error creating kubeconfig: {exc}", "Make sure your kubeconfig is valid and accessible")

    namespace = args.namespace
    if not namespace and not args.all_namespaces:
        namespace = config.context_namespace()

    with KubeClient(config) as client:
        try:
            client.test_metrics_api()
        except KubeError as exc:
            return _error(
                f"Error connecting to metrics API: {exc}",
                "Please ensure metrics-server is properly installed and running",
            )
        return _report(client, args, mode, namespace, thresholds)


def _report(client, args, mode, namespace, thresholds) -> int:
    if args.all_namespaces:
        print("Fetching namespaces... ", end="", flush=True)
        try:
            namespaces = client.list_namespaces()
        except KubeError as exc:
            return _error(f"\nError fetching namespaces: {exc}")
        print(f"found {len(namespaces)} namespaces")
    else:
        namespaces = [namespace]

    running = {}
    for ns in namespaces:
        try:
            running[ns] = [pod for pod in client.list_pods(ns) if is_running(pod)]
        except KubeError as exc:
            print(f"Warning: Error fetching pods in namespace {ns}: {exc}", file=sys.stderr)

    total = sum(map(len, running.values()))
    if total == 0:
        print("No running pods found in the specified namespace(s)")
        return 0
    print(f"Processing {total} running pods in {mode} mode...")

    rows = []
    processed = 0
    for ns, pods in running.items():
        for pod in pods:
            name = pod["metadata"]["name"]
            processed += 1
            print(f"\rProgress: {processed}/{total} pods", end="", flush=True)
            try:
                metrics = client.get_pod_metrics(ns, name)
            except KubeError as exc:
                print(f"\nWarning: Could not get metrics for pod {name} in namespace {ns}: {exc}", file=sys.stderr)
                continue
            usage = pod_usage(pod, metrics, mode)
            if args.ignore_unset and not (usage.cpu_has_comparison or usage.mem_has_comparison):
                continue
            if args.difference_only and not (usage.over_cpu or usage.over_memory):
                continue
            rows.append(build_row(ns, name, usage, args.all_namespaces, args.output, thresholds))

    print(f"\rProgress: {processed}/{total} pods - Complete!\n")
    if not rows:
        print("No pods match the specified criteria")
        return 0
    print(render_table(build_headers(args.all_namespaces, args.output, mode), rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())