class KubeconfigError(Exception):
    """Base error for kubeconfig extraction failures."""


class KubeconfigParseError(KubeconfigError):
    pass


class ClusterNotFoundError(KubeconfigError):
    pass


class MissingFieldError(KubeconfigError):
    def __init__(self, field):
        self.field = field
        super().__init__(f'{field} field is empty in kubeconfig cluster')


class CertificateDecodeError(KubeconfigError):
    pass
