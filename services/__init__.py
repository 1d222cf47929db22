# Business logic services
from .namespace import NamespaceService
from .pod import PodService
from .service import ServiceService
from .ingress import IngressService

__all__ = ['NamespaceService', 'PodService', 'ServiceService', 'IngressService']
