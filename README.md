# kdiff

`kdiff` compares what your Kubernetes pods ask for (their resource requests,
or their limits) with what they actually use, as reported by the cluster's
metrics API (`metrics.k8s.io/v1beta1`, served by metrics-server). Each
running pod gets one row with memory and CPU side by side and a colour-coded
percentage difference.

## Requirements

- A reachable cluster and a kubeconfig file describing it
- metrics-server installed and running in the cluster

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
kdiff [flags]
```

| Flag | Meaning |
| --- | --- |
| `-n NAMESPACE` | Namespace to check. Defaults to the namespace of the selected context, or `default` if it sets none. |
| `-o cpu\|memory` | Show only the CPU columns or only the memory columns. |
| `--kubeconfig PATH` | Kubeconfig file to use. Defaults to `~/.kube/config`. |
| `--context NAME` | Kubeconfig context to use instead of the file's current context. |
| `-m, --mode requests\|limits` | Compare usage with requests (the default) or with limits. Case does not matter. |
| `-d` | Show only pods whose CPU or memory usage is over their requests or limits. |
| `-a, -A` | Check all namespaces; a `NAMESPACE` column is added. |
| `-i, --ignore-unset` | Skip pods that set neither a CPU nor a memory request (or limit). |
| `--color-red N` | Percentage at or above which the difference is shown in red. |
| `--color-yellow N` | Percentage at or above which the difference is shown in yellow. |
| `--color-cyan N` | Percentage below which the difference is shown in cyan. |
| `-h` | Show the help message. |

The long options may also be written with a single dash (`-mode`,
`-kubeconfig`, `-color-red`, …).

Only pods in the `Running` phase are considered. Before listing pods, `kdiff`
checks that the metrics API answers. Pods whose metrics cannot be fetched,
and namespaces whose pods cannot be listed, are reported as warnings on
standard error and skipped. Configuration and connection errors end the
command with exit status 1.

### Examples

```
# Current namespace, requests mode
kdiff

# A namespace, in limits mode
kdiff -n kube-system --mode limits

# All namespaces, CPU only, limits mode
kdiff -A -o cpu -m limits

# Only pods over their requests, skipping pods that set none
kdiff -d -i

# Custom colour thresholds
kdiff --mode limits --color-red -5 --color-yellow -30 --color-cyan -70
```

## Reading the output

Requests or limits are summed over the pod's containers, and usage over the
containers in its metrics. The difference column is
`(used - compared) / compared × 100`; a negative value means the pod uses
less than it asked for.

| Colour | Meaning | Requests mode | Limits mode |
| --- | --- | --- | --- |
| Red | over-utilised / near limits | ≥ 0.0 % | ≥ −10.0 % |
| Yellow | warning zone | ≥ −20.0 % | ≥ −40.0 % |
| Green | well-utilised | between cyan and yellow | between cyan and yellow |
| Cyan | very under-utilised | < −90.0 % | < −80.0 % |
| Magenta | no request or limit set (`inf%`) | | |

Any threshold not given on the command line takes the default for the chosen
mode. The thresholds must satisfy cyan < yellow < red; otherwise `kdiff`
exits with an error.

Memory is shown in binary units (`1.5Ki`, `128.0Mi`, `2.0Gi`, …), values
under 1024 as bytes (`512 B`), and zero as `0`. CPU is shown in millicores
(`250m`).

## Using it from Python

The pieces the command is built from can be used on their own:

- `kdiff.quantity`: `parse_quantity("128Mi")` returns the exact value as a
  `Fraction`; `cpu_millis` and `memory_bytes` convert quantity strings to
  millicores and bytes. Invalid text raises `QuantityError`.
- `kdiff.thresholds`: `Mode`, `ColorThresholds`, `default_thresholds(mode,
  red, yellow, cyan)` and `validate_color_thresholds`, which raises
  `ValueError` unless cyan < yellow < red.
- `kdiff.formatters`: `format_memory` and `format_percentage`.
- `kdiff.kube`: `KubeConfig.load(path, context)` reads a kubeconfig;
  `KubeClient` (usable as a context manager) lists namespaces and pods,
  fetches pod metrics and checks the metrics API, raising `KubeError` on
  failure.
- `kdiff.report`: `pod_usage`, `is_running`, `build_headers`, `build_row`
  and `render_table`.
- `kdiff.help`: `help_text(prog)` returns the help message.

## Limitations

- Only a single kubeconfig file is read; the `KUBECONFIG` environment
  variable is not consulted and several files are not merged.
- Authentication supports bearer tokens, basic auth and client certificates
  (as file paths or inline data). Exec credential plugins and auth providers
  are not supported, and in-cluster service-account configuration is not
  used.