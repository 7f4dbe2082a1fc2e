from .configmap import build_configmap, configmap_from_kubeconfig, dump_configmap
from .errors import (
    CertificateDecodeError,
    ClusterNotFoundError,
    KubeconfigError,
    KubeconfigParseError,
    MissingFieldError,
)
from .kubeconfig import Cluster, ClusterConfig, KubeConfig, extract_flux_fields, parse_kubeconfig

__all__ = [
    'Cluster',
    'ClusterConfig',
    'KubeConfig',
    'extract_flux_fields',
    'parse_kubeconfig',
    'build_configmap',
    'configmap_from_kubeconfig',
    'dump_configmap',
    'KubeconfigError',
    'KubeconfigParseError',
    'ClusterNotFoundError',
    'MissingFieldError',
    'CertificateDecodeError',
]
