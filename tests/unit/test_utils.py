"""
Unit tests for utility functions
"""
from kubernetes import client as k8s

from factories import list_meta
from models.common import ResourcePage
from models.namespace import NamespaceResponse
from utils.k8s import continue_token_of, default_labels, list_kwargs, load_balancer_addresses
from utils.responses import list_response, success_response


class TestListKwargs:
    """Tests for list_kwargs"""

    def test_empty(self):
        assert list_kwargs() == {}

    def test_limit_and_continue(self):
        assert list_kwargs(50, "abc") == {"limit": 50, "_continue": "abc"}

    def test_empty_token_omitted(self):
        assert list_kwargs(10, "") == {"limit": 10}


class TestContinueToken:
    """Tests for continue_token_of"""

    def test_token(self):
        result = k8s.V1PodList(items=[], metadata=list_meta("eyJ2IjoibWV0YS5rOHMuaW8vdjEifQ"))
        assert continue_token_of(result) == "eyJ2IjoibWV0YS5rOHMuaW8vdjEifQ"

    def test_last_page(self):
        assert continue_token_of(k8s.V1PodList(items=[], metadata=list_meta())) is None
        assert continue_token_of(k8s.V1PodList(items=[], metadata=list_meta(""))) is None

    def test_no_metadata(self):
        assert continue_token_of(k8s.V1PodList(items=[])) is None


class TestLoadBalancerAddresses:
    """Tests for load_balancer_addresses"""

    def test_no_status(self):
        assert load_balancer_addresses(None) is None
        assert load_balancer_addresses(k8s.V1ServiceStatus()) is None

    def test_ip_or_hostname(self):
        status = k8s.V1ServiceStatus(
            load_balancer=k8s.V1LoadBalancerStatus(
                ingress=[
                    k8s.V1LoadBalancerIngress(ip="192.168.1.10"),
                    k8s.V1LoadBalancerIngress(hostname="lb.example.com"),
                ]
            )
        )
        assert load_balancer_addresses(status) == ["192.168.1.10", "lb.example.com"]


class TestDefaultLabels:
    """Tests for default_labels"""

    def test_missing(self):
        assert default_labels("web", None) == {"app": "web"}

    def test_empty_kept(self):
        assert default_labels("web", {}) == {}

    def test_given(self):
        assert default_labels("web", {"tier": "frontend"}) == {"tier": "frontend"}


class TestResponses:
    """Tests for response envelopes"""

    def test_success_with_data(self):
        body = success_response(NamespaceResponse(name="apps", status="Active"), "ok")
        assert body == {"success": True, "message": "ok", "data": {"name": "apps", "status": "Active"}}

    def test_success_message_only(self):
        assert success_response(message="Pod web deleted successfully") == {
            "success": True,
            "message": "Pod web deleted successfully",
        }

    def test_list(self):
        items = [NamespaceResponse(name="a", status="Active"), NamespaceResponse(name="b", status="Active")]
        body = list_response(ResourcePage(items))
        assert body["count"] == 2
        assert [item["name"] for item in body["data"]] == ["a", "b"]
        assert "continue" not in body

    def test_list_with_continue(self):
        body = list_response(ResourcePage([], "next-token"))
        assert body == {"success": True, "data": [], "count": 0, "continue": "next-token"}
