"""Access to a Kubernetes cluster's core and metrics APIs."""

from __future__ import annotations

import base64
import binascii
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import quote

import requests
import yaml

_METRICS = "/apis/metrics.k8s.io/v1beta1"


class KubeError(Exception):
    """Raised when the cluster cannot be configured or reached."""


def default_kubeconfig_path() -> str:
    """Return the kubeconfig path used when none is given."""
    return str(Path.home() / ".kube" / "config")


def _named(entries: Any, name: str, kind: str) -> dict | None:
    for entry in entries or []:
        if isinstance(entry, dict) and entry.get("name") == name:
            return entry.get(kind) or {}
    return None


def _decode(value: str | None) -> bytes | None:
    try:
        return base64.b64decode(value) if value else None
    except (binascii.Error, ValueError) as exc:
        raise KubeError("invalid base64 data in kubeconfig") from exc


@dataclass
class KubeConfig:
    """Connection settings for one kubeconfig context."""

    path: str
    context_name: str
    server: str
    namespace: str = ""
    certificate_authority: str | None = None
    certificate_authority_data: bytes | None = None
    client_certificate: str | None = None
    client_certificate_data: bytes | None = None
    client_key: str | None = None
    client_key_data: bytes | None = None
    token: str | None = None
    username: str | None = None
    password: str | None = None
    insecure_skip_tls_verify: bool = False

    @classmethod
    def load(cls, path, context=None) -> KubeConfig:
        """Read ``path`` and resolve ``context``, or the current context when None."""
        file_path = Path(path).expanduser()
        try:
            raw = yaml.safe_load(file_path.read_text()) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise KubeError(f"cannot load kubeconfig {file_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise KubeError(f"invalid kubeconfig {file_path}: not a mapping")

        name = context or raw.get("current-context") or ""
        ctx = _named(raw.get("contexts"), name, "context")
        if ctx is None:
            raise KubeError(f"context {name!r} does not exist")
        cluster = _named(raw.get("clusters"), ctx.get("cluster") or "", "cluster")
        if not cluster or not cluster.get("server"):
            raise KubeError(f"no server found for context {name!r}")
        user = _named(raw.get("users"), ctx.get("user") or "", "user") or {}

        def resolve(value):
            return str(file_path.parent / Path(value).expanduser()) if value else None

        return cls(
            path=str(file_path),
            context_name=name,
            server=cluster["server"],
            namespace=ctx.get("namespace") or "",
            certificate_authority=resolve(cluster.get("certificate-authority")),
            certificate_authority_data=_decode(cluster.get("certificate-authority-data")),
            client_certificate=resolve(user.get("client-certificate")),
            client_certificate_data=_decode(user.get("client-certificate-data")),
            client_key=resolve(user.get("client-key")),
            client_key_data=_decode(user.get("client-key-data")),
            token=user.get("token") or None,
            username=user.get("username"),
            password=user.get("password"),
            insecure_skip_tls_verify=bool(cluster.get("insecure-skip-tls-verify", False)),
        )

    def context_namespace(self) -> str:
        """Return the context's namespace, or ``default`` when it sets none."""
        return self.namespace or "default"


class KubeClient:
    """A small client for the core and metrics APIs of one cluster."""

    def __init__(self, config: KubeConfig) -> None:
        self.config = config
        self._base = config.server.rstrip("/")
        self._tempdir: tempfile.TemporaryDirectory | None = None
        self.session = requests.Session()
        self.session.headers["Accept"] = "application/json"

        ca = self._file("ca.crt", config.certificate_authority, config.certificate_authority_data)
        if config.insecure_skip_tls_verify:
            self.session.verify = False
        elif ca:
            self.session.verify = ca
        cert = self._file("client.crt", config.client_certificate, config.client_certificate_data)
        key = self._file("client.key", config.client_key, config.client_key_data)
        if cert:
            self.session.cert = (cert, key) if key else cert
        if config.token:
            self.session.headers["Authorization"] = f"Bearer {config.token}"
        elif config.username:
            self.session.auth = (config.username, config.password or "")

    def _file(self, name: str, path: str | None, data: bytes | None) -> str | None:
        if path or not data:
            return path
        if self._tempdir is None:
            self._tempdir = tempfile.TemporaryDirectory(prefix="kdiff-")
        target = Path(self._tempdir.name) / name
        target.write_bytes(data)
        return str(target)

    def close(self) -> None:
        """Close the session and remove any credential files."""
        self.session.close()
        if self._tempdir is not None:
            self._tempdir.cleanup()
            self._tempdir = None

    def __enter__(self) -> KubeClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, path: str, params: dict | None = None) -> Any:
        try:
            response = self.session.get(self._base + path, params=params)
        except requests.RequestException as exc:
            raise KubeError(str(exc)) from exc
        try:
            body = response.json()
        except ValueError:
            body = None
        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            raise KubeError(message or f"the server responded with status {response.status_code}")
        if body is None:
            raise KubeError(f"invalid response from {path}")
        return body

    def list_namespaces(self) -> list[str]:
        """Return the names of all namespaces."""
        body = self._get("/api/v1/namespaces")
        return [item["metadata"]["name"] for item in body.get("items") or []]

    def list_pods(self, namespace: str) -> list[dict]:
        """Return the pods of ``namespace`` as API objects."""
        return list(self._get(f"/api/v1/namespaces/{quote(namespace, safe='')}/pods").get("items") or [])

    def get_pod_metrics(self, namespace: str, name: str) -> dict:
        """Return the metrics object of one pod."""
        return self._get(f"{_METRICS}/namespaces/{quote(namespace, safe='')}/pods/{quote(name, safe='')}")

    def test_metrics_api(self) -> None:
        """Raise KubeError unless the metrics API answers."""
        self._get(f"{_METRICS}/nodes", params={"limit": 1})