"""Pull the API server address and CA certificate out of a kubeconfig.

Only the fields needed for a Flux workload identity ConfigMap are read.
Contexts, users and everything else in the document are ignored.
"""

import base64
import datetime
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import yaml

from .errors import (
    CertificateDecodeError,
    ClusterNotFoundError,
    KubeconfigParseError,
    MissingFieldError,
)

logger = logging.getLogger(__name__)

SERVER_KEY = 'server'
CA_DATA_KEY = 'certificate-authority-data'


@dataclass
class ClusterConfig:
    server: str = ''
    certificate_authority_data: str = ''


@dataclass
class Cluster:
    name: str = ''
    cluster: ClusterConfig = field(default_factory=ClusterConfig)


@dataclass
class KubeConfig:
    clusters: List[Cluster] = field(default_factory=list)


def _mapping(value, what):
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise KubeconfigParseError(
            f'failed to parse kubeconfig YAML: {what} must be a mapping, got {type(value).__name__}')
    return value


def _string(value, what):
    if value is None:
        return ''
    # numbers, booleans and dates keep their text
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float, datetime.date)):
        return str(value)
    if not isinstance(value, str):
        raise KubeconfigParseError(
            f'failed to parse kubeconfig YAML: {what} must be a string, got {type(value).__name__}')
    return value


def parse_kubeconfig(kubeconfig_yaml: str) -> KubeConfig:
    try:
        doc = yaml.safe_load(kubeconfig_yaml)
    except yaml.YAMLError as e:
        raise KubeconfigParseError(f'failed to parse kubeconfig YAML: {e}') from e

    doc = _mapping(doc, 'kubeconfig')
    entries = doc.get('clusters')
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise KubeconfigParseError(
            f'failed to parse kubeconfig YAML: clusters must be a list, got {type(entries).__name__}')

    clusters = []
    for i, entry in enumerate(entries):
        entry = _mapping(entry, f'clusters[{i}]')
        details = _mapping(entry.get('cluster'), f'clusters[{i}].cluster')
        clusters.append(Cluster(
            name=_string(entry.get('name'), f'clusters[{i}].name'),
            cluster=ClusterConfig(
                server=_string(details.get(SERVER_KEY), f'clusters[{i}].cluster.{SERVER_KEY}'),
                certificate_authority_data=_string(
                    details.get(CA_DATA_KEY), f'clusters[{i}].cluster.{CA_DATA_KEY}'),
            ),
        ))
    return KubeConfig(clusters=clusters)


def extract_flux_fields(kubeconfig_yaml: str) -> Tuple[str, str]:
    """Return ``(server, ca_cert)`` for the first cluster in a kubeconfig.

    ``ca_cert`` is the PEM text decoded from ``certificate-authority-data``.
    Raises a :class:`~fluxkubeconfig.errors.KubeconfigError` subclass when the
    document can't be parsed, has no clusters, lacks either field, or holds
    CA data that isn't valid base64.
    """
    config = parse_kubeconfig(kubeconfig_yaml)

    if not config.clusters:
        raise ClusterNotFoundError('no clusters found in kubeconfig')

    entry = config.clusters[0]
    logger.debug('Using cluster %r out of %d', entry.name, len(config.clusters))
    cluster = entry.cluster

    if cluster.server == '':
        raise MissingFieldError(SERVER_KEY)
    if cluster.certificate_authority_data == '':
        raise MissingFieldError(CA_DATA_KEY)

    try:
        # wrapped block scalars carry line breaks
        ca_data = cluster.certificate_authority_data.replace('\r', '').replace('\n', '')
        ca_bytes = base64.b64decode(ca_data, validate=True)
    except ValueError as e:
        raise CertificateDecodeError(f'failed to decode {CA_DATA_KEY}: {e}') from e

    return cluster.server, ca_bytes.decode('utf-8', errors='replace')
