# Core module - configuration, logging, errors, kubernetes clients
from .config import ConfigError, Settings, get_settings, validate_config
from .errors import KubernetesConfigError, KubernetesConnectionError
from .kubernetes import K8sClients, get_k8s_clients, initialize_k8s_clients

__all__ = [
    'ConfigError',
    'Settings',
    'get_settings',
    'validate_config',
    'KubernetesConfigError',
    'KubernetesConnectionError',
    'K8sClients',
    'get_k8s_clients',
    'initialize_k8s_clients',
]
