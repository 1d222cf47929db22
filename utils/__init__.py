# Utility functions
from .k8s import list_kwargs, continue_token_of, load_balancer_addresses, default_labels
from .responses import success_response, list_response

# Traefik Ingress annotation 변환
from .traefik import encode_annotations, decode_annotations, has_settings

__all__ = [
    'list_kwargs', 'continue_token_of', 'load_balancer_addresses', 'default_labels',
    'success_response', 'list_response',
    'encode_annotations', 'decode_annotations', 'has_settings',
]
