# Pydantic models
from .common import ApiModel, ResourcePage
from .namespace import NamespaceResponse
from .pod import (
    ResourceQuantity, ResourceRequirements, EnvVar,
    CreatePodRequest, UpdatePodRequest, ContainerInfo, PodResponse
)
from .service import ServicePortSpec, CreateServiceRequest, ServicePort, ServiceResponse
from .ingress import (
    TraefikConfig, IngressPathSpec, IngressRuleSpec, IngressTLS,
    CreateIngressRequest, IngressPath, IngressRule, IngressResponse
)

__all__ = [
    'ApiModel', 'ResourcePage',
    # Namespace
    'NamespaceResponse',
    # Pod
    'ResourceQuantity', 'ResourceRequirements', 'EnvVar',
    'CreatePodRequest', 'UpdatePodRequest', 'ContainerInfo', 'PodResponse',
    # Service
    'ServicePortSpec', 'CreateServiceRequest', 'ServicePort', 'ServiceResponse',
    # Ingress
    'TraefikConfig', 'IngressPathSpec', 'IngressRuleSpec', 'IngressTLS',
    'CreateIngressRequest', 'IngressPath', 'IngressRule', 'IngressResponse',
]
