"""
Pytest configuration and fixtures
"""
import os
import sys
from typing import AsyncGenerator, Generator
from unittest.mock import MagicMock

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from core.config import validate_config
from core.kubernetes import K8sClients


# ============================================
# App Fixtures
# ============================================

@pytest.fixture
def settings():
    """Settings validated from a fixed test environment"""
    return validate_config({"APP_ENV": "test", "DEFAULT_NAMESPACE": "default"})


@pytest.fixture
def mock_k8s_clients() -> K8sClients:
    """Mock Kubernetes API clients"""
    return K8sClients(core_v1=MagicMock(), networking_v1=MagicMock())


@pytest.fixture
def app(settings, mock_k8s_clients):
    """Create FastAPI app for testing"""
    from main import create_app
    return create_app(settings, mock_k8s_clients)


@pytest.fixture
def client(app) -> Generator:
    """Synchronous test client"""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
async def async_client(app) -> AsyncGenerator:
    """Asynchronous test client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def core_v1(mock_k8s_clients):
    return mock_k8s_clients.core_v1


@pytest.fixture
def networking_v1(mock_k8s_clients):
    return mock_k8s_clients.networking_v1


# ============================================
# Data Fixtures
# ============================================

@pytest.fixture
def sample_pod_request():
    """Sample pod creation payload"""
    return {
        "name": "web",
        "namespace": "apps",
        "image": "nginx:1.25",
        "resources": {
            "requests": {"cpu": "100m", "memory": "128Mi"},
            "limits": {"cpu": "500m", "memory": "256Mi"},
        },
        "env": [{"name": "MODE", "value": "production"}],
    }


@pytest.fixture
def sample_service_request():
    """Sample service creation payload"""
    return {
        "name": "web",
        "namespace": "apps",
        "selector": {"app": "web"},
        "ports": [{"name": "http", "port": 80, "targetPort": 8080}],
    }


@pytest.fixture
def sample_ingress_request():
    """Sample ingress creation payload with Traefik settings"""
    return {
        "name": "web",
        "namespace": "apps",
        "rules": [
            {
                "host": "web.example.com",
                "paths": [{"path": "/", "serviceName": "web", "servicePort": 80}],
            }
        ],
        "annotations": {"team": "platform"},
        "tls": [{"hosts": ["web.example.com"], "secretName": "web-tls"}],
        "traefik": {
            "entryPoints": ["websecure"],
            "certResolver": "letsencrypt",
            "priority": 100,
            "sticky": True,
            "passHostHeader": True,
        },
    }
