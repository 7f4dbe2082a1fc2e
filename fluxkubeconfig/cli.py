import argparse
import logging
import os
import sys

from .configmap import build_configmap, dump_configmap
from .errors import KubeconfigError
from .kubeconfig import extract_flux_fields

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def read_kubeconfig(path):
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def build_parser():
    parser = argparse.ArgumentParser(
        prog='flux-kubeconfig',
        description='Extract the API server and CA certificate from a kubeconfig for a Flux workload identity ConfigMap')
    parser.add_argument('--kubeconfig', default=os.environ.get('KUBECONFIG'),
                        help='The location of the kubeconfig to extract from. Defaults to $KUBECONFIG, "-" reads stdin.')
    parser.add_argument('--output', choices=['server', 'ca', 'configmap'], default='configmap',
                        help='What to print: the server address, the PEM CA certificate or a ConfigMap manifest.')
    parser.add_argument('--name', help='The ConfigMap name.')
    parser.add_argument('--namespace', help='The ConfigMap namespace.')
    parser.add_argument('--provider', help='The workload identity provider stored in the ConfigMap, e.g. aws, azure, gcp, generic.')
    parser.add_argument('--cluster', help='The cloud cluster identifier stored in the ConfigMap.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if not args.kubeconfig:
        print('--kubeconfig is required', file=sys.stderr)
        sys.exit(1)
    if args.output == 'configmap' and not args.name:
        print('--name is required', file=sys.stderr)
        sys.exit(1)

    # $KUBECONFIG may hold a path list; only the first file is read
    kubeconfig = args.kubeconfig.split(os.pathsep)[0] if args.kubeconfig != '-' else '-'
    logger.debug('Reading kubeconfig from %s', kubeconfig)

    try:
        server, ca_cert = extract_flux_fields(read_kubeconfig(kubeconfig))
    except (KubeconfigError, OSError, UnicodeDecodeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.output == 'server':
        print(server)
    elif args.output == 'ca':
        print(ca_cert)
    else:
        manifest = build_configmap(args.name, server, ca_cert, namespace=args.namespace,
                                   provider=args.provider, cluster=args.cluster)
        sys.stdout.write(dump_configmap(manifest))


if __name__ == '__main__':
    main()
