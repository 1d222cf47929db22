"""
Integration tests for pod API
"""
from kubernetes import client as k8s

from factories import api_exception, list_meta, make_pod


class TestListPods:
    """Tests for GET /api/pods"""

    def test_all_namespaces(self, client, core_v1):
        core_v1.list_pod_for_all_namespaces.return_value = k8s.V1PodList(
            items=[make_pod("web"), make_pod("api", namespace="apps")], metadata=list_meta()
        )

        response = client.get("/api/pods")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["count"] == 2
        assert [p["name"] for p in data["data"]] == ["web", "api"]
        assert "continue" not in data
        core_v1.list_pod_for_all_namespaces.assert_called_once_with(limit=100)

    def test_namespace_filter(self, client, core_v1):
        core_v1.list_namespaced_pod.return_value = k8s.V1PodList(items=[make_pod(namespace="apps")])

        response = client.get("/api/pods", params={"namespace": "apps"})
        assert response.status_code == 200
        assert response.json()["data"][0]["namespace"] == "apps"
        core_v1.list_namespaced_pod.assert_called_once_with("apps", limit=100)

    def test_pagination(self, client, core_v1):
        """Test limit/continue are forwarded and the next token returned"""
        core_v1.list_pod_for_all_namespaces.return_value = k8s.V1PodList(
            items=[make_pod()], metadata=list_meta("page-2")
        )

        response = client.get("/api/pods", params={"limit": 1, "continue": "page-1"})
        assert response.json()["continue"] == "page-2"
        core_v1.list_pod_for_all_namespaces.assert_called_once_with(limit=1, _continue="page-1")

    def test_limit_capped(self, client, core_v1):
        core_v1.list_pod_for_all_namespaces.return_value = k8s.V1PodList(items=[])

        client.get("/api/pods", params={"limit": 5000})
        core_v1.list_pod_for_all_namespaces.assert_called_once_with(limit=1000)

    def test_invalid_limit(self, client):
        response = client.get("/api/pods", params={"limit": 0})
        assert response.status_code == 400


class TestGetPod:
    """Tests for GET /api/pods/{namespace}/{name}"""

    def test_found(self, client, core_v1):
        core_v1.read_namespaced_pod.return_value = make_pod()

        response = client.get("/api/pods/default/web")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["podIP"] == "10.42.0.12"
        assert data["containers"][0]["ready"] is True
        core_v1.read_namespaced_pod.assert_called_once_with("web", "default")

    def test_not_found(self, client, core_v1):
        core_v1.read_namespaced_pod.side_effect = api_exception(404, 'pods "ghost" not found', "NotFound")

        response = client.get("/api/pods/default/ghost")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": 'pods "ghost" not found', "reason": "NotFound"}


class TestCreatePod:
    """Tests for POST /api/pods"""

    def test_create(self, client, core_v1, sample_pod_request):
        core_v1.create_namespaced_pod.side_effect = lambda namespace, body: body

        response = client.post("/api/pods", json=sample_pod_request)
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Pod created successfully"
        assert data["data"]["name"] == "web"
        assert data["data"]["namespace"] == "apps"
        assert data["data"]["labels"] == {"app": "web"}

        namespace, body = core_v1.create_namespaced_pod.call_args.args
        assert namespace == "apps"
        assert body.spec.containers[0].resources.requests == {"cpu": "100m", "memory": "128Mi"}

    def test_default_namespace(self, client, core_v1):
        core_v1.create_namespaced_pod.side_effect = lambda namespace, body: body

        response = client.post("/api/pods", json={"name": "web", "image": "nginx"})
        assert response.status_code == 201
        assert core_v1.create_namespaced_pod.call_args.args[0] == "default"

    def test_invalid_name(self, client, core_v1):
        response = client.post("/api/pods", json={"name": "Web_App", "image": "nginx"})
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Validation error"
        assert data["details"]
        core_v1.create_namespaced_pod.assert_not_called()

    def test_already_exists(self, client, core_v1, sample_pod_request):
        core_v1.create_namespaced_pod.side_effect = api_exception(
            409, 'pods "web" already exists', "AlreadyExists"
        )

        response = client.post("/api/pods", json=sample_pod_request)
        assert response.status_code == 409
        assert response.json()["reason"] == "AlreadyExists"


class TestUpdatePod:
    """Tests for PATCH /api/pods/{namespace}/{name}"""

    def test_update_labels(self, client, core_v1):
        core_v1.patch_namespaced_pod.return_value = make_pod(labels={"app": "web", "tier": "frontend"})

        response = client.patch("/api/pods/default/web", json={"labels": {"app": "web", "tier": "frontend"}})
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Pod updated successfully"
        assert data["data"]["labels"]["tier"] == "frontend"
        core_v1.patch_namespaced_pod.assert_called_once_with(
            "web", "default", {"metadata": {"labels": {"app": "web", "tier": "frontend"}}},
            _content_type="application/merge-patch+json",
        )

    def test_missing_labels_leaves_pod_unchanged(self, client, core_v1):
        """Test an empty body does not send labels: null"""
        core_v1.patch_namespaced_pod.return_value = make_pod()

        response = client.patch("/api/pods/default/web", json={})
        assert response.status_code == 200
        body = core_v1.patch_namespaced_pod.call_args.args[2]
        assert body == {"metadata": {}}
        assert response.json()["data"]["labels"] == {"app": "web"}

    def test_empty_labels_sent(self, client, core_v1):
        """Test an explicit empty map is sent as given"""
        core_v1.patch_namespaced_pod.return_value = make_pod(labels={})

        client.patch("/api/pods/default/web", json={"labels": {}})
        assert core_v1.patch_namespaced_pod.call_args.args[2] == {"metadata": {"labels": {}}}


class TestDeletePod:
    """Tests for DELETE /api/pods/{namespace}/{name}"""

    def test_delete(self, client, core_v1):
        response = client.delete("/api/pods/default/web")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Pod web deleted successfully"}
        core_v1.delete_namespaced_pod.assert_called_once_with("web", "default")

    def test_delete_missing(self, client, core_v1):
        core_v1.delete_namespaced_pod.side_effect = api_exception(404, 'pods "web" not found', "NotFound")

        response = client.delete("/api/pods/default/web")
        assert response.status_code == 404
        assert response.json()["success"] is False
