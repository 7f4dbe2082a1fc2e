import pytest

CA_DATA = 'LS0tLS1CRUdJTiBDRVJUSUZJQ0FURS0tLS0tCk1JSUN0ZXN0MTIzCi0tLS0tRU5EIENFUlRJRklDQVRFLS0tLS0='
CA_CERT = '-----BEGIN CERTIFICATE-----\nMIICtest123\n-----END CERTIFICATE-----'

CAPI_KUBECONFIG = f"""apiVersion: v1
clusters:
- cluster:
    certificate-authority-data: {CA_DATA}
    server: https://172.18.0.3:6443
  name: capi-helloworld
contexts:
- context:
    cluster: capi-helloworld
    user: capi-helloworld-admin
  name: capi-helloworld-admin@capi-helloworld
current-context: capi-helloworld-admin@capi-helloworld
kind: Config
preferences: {{}}
users:
- name: capi-helloworld-admin
  user:
    client-certificate-data: LS0tLS1...
    client-key-data: LS0tLS1...
"""


@pytest.fixture
def capi_kubeconfig():
    return CAPI_KUBECONFIG


@pytest.fixture
def kubeconfig_file(tmp_path):
    path = tmp_path / 'kubeconfig'
    path.write_text(CAPI_KUBECONFIG)
    return path
