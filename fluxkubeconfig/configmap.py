"""Render the credential-free ConfigMap Flux reads through ``kubeConfig.configMapRef``."""

import yaml

from .kubeconfig import extract_flux_fields

ADDRESS_KEY = 'address'
CA_CERT_KEY = 'ca.crt'


def build_configmap(name, server, ca_cert, namespace=None, provider=None, cluster=None):
    if not name:
        raise ValueError('ConfigMap name must not be empty')

    metadata = {'name': name}
    if namespace:
        metadata['namespace'] = namespace

    data = {ADDRESS_KEY: server, CA_CERT_KEY: ca_cert}
    if provider:
        data['provider'] = provider
    if cluster:
        data['cluster'] = cluster

    return {
        'apiVersion': 'v1',
        'kind': 'ConfigMap',
        'metadata': metadata,
        'data': data,
    }


def configmap_from_kubeconfig(kubeconfig_yaml, name, **kwargs):
    server, ca_cert = extract_flux_fields(kubeconfig_yaml)
    return build_configmap(name, server, ca_cert, **kwargs)


def dump_configmap(manifest):
    return yaml.safe_dump(manifest, default_flow_style=False, sort_keys=False)
