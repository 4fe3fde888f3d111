"""Tests for FastAPI endpoints."""
import pytest
from fastapi.testclient import TestClient

from dataplot.analyzers import ResidualMode
from dataplot.application import create_app
from dataplot.config import Settings
from dataplot.expvars import new_registry


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI app."""
    return TestClient(app)


class TestAPI:
    """Test suite for general endpoints."""

    def test_root_endpoint(self, client):
        """Test root endpoint returns correct response."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "dataplot API"
        assert "version" in data

    def test_debug_vars(self, client):
        """Published variables are listed together."""
        client.post("/point", data={"x": "1.5", "y": "-2"})

        response = client.get("/debug/vars")

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data["cmdline"], list)
        assert data["point"] == {"x": 1.5, "y": -2.0}


class TestVizEndpoint:
    """Test suite for the data series endpoint."""

    def test_post_series(self, client):
        """A submission returns the parsed series and its regression line."""
        response = client.post("/goplot/viz", data={"dataseries": "1,1\n2,2\nbad line\n3,3"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.headers["x-discarded-lines"] == "1"
        data = response.json()
        assert list(data) == ["series", "regressionLine"]
        assert data["series"] == [{"x": 1.0, "y": 1.0}, {"x": 2.0, "y": 2.0}, {"x": 3.0, "y": 3.0}]
        assert data["regressionLine"] == {
            "slope": 1.0,
            "intercept": 0.0,
            "stdError": 0.0,
            "correlation": 1.0,
        }

    def test_post_sample_file(self, client, sample_series_path):
        """The bundled sample keeps its ten valid points."""
        source = sample_series_path.read_text(encoding="utf-8")
        response = client.post("/goplot/viz", data={"dataseries": source})

        assert response.status_code == 200
        assert len(response.json()["series"]) == 10
        assert response.headers["x-discarded-lines"] == "4"

    def test_post_without_field(self, client):
        """A missing dataseries field behaves like an empty submission."""
        response = client.post("/goplot/viz")

        assert response.status_code == 200
        assert response.json() == {"series": [], "regressionLine": None}
        assert response.headers["x-regression-status"] == "degenerate"

    def test_post_degenerate_series(self, client):
        """Degenerate series keep their points but carry no line."""
        response = client.post("/goplot/viz", data={"dataseries": "1,1\n2,2"})

        data = response.json()
        assert data["series"] == [{"x": 1.0, "y": 1.0}, {"x": 2.0, "y": 2.0}]
        assert data["regressionLine"] is None

    def test_residual_mode_setting(self, client_dir):
        """The configured residual mode applies to submissions."""
        settings = Settings(client_dir=client_dir, residual_mode=ResidualMode.CONVENTIONAL)
        client = TestClient(create_app(settings, registry=new_registry()))

        response = client.post("/goplot/viz", data={"dataseries": "0,1\n1,3\n2,5\n3,7"})

        assert response.json()["regressionLine"]["correlation"] == 1.0

    def test_get_serves_page(self, client):
        """GET returns the visualisation page."""
        response = client.get("/goplot/viz")
        assert response.status_code == 200
        assert "viz" in response.text
        assert response.headers["content-type"].startswith("text/html")

    def test_missing_script(self, client):
        """A missing client file answers 404."""
        response = client.get("/goplot/graph.js")
        assert response.status_code == 404

    def test_method_not_allowed(self, client):
        """Only GET and POST are routed."""
        response = client.put("/goplot/viz", data={"dataseries": "1,1"})
        assert response.status_code == 405


class TestPointEndpoint:
    """Test suite for the demo point endpoint."""

    def test_get_increments_x(self, client):
        """Each GET moves the point one unit along x."""
        assert client.get("/point").text == "point is (1.000000,0.000000)\n"
        assert client.get("/point").text == "point is (2.000000,0.000000)\n"

    def test_post_sets_coordinates(self, client):
        """POST replaces both coordinates."""
        response = client.post("/point", data={"x": "2.5", "y": "-1"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "point is (2.500000,-1.000000)\n"

    def test_post_invalid_values_become_zero(self, client):
        """Unparseable or missing values are read as zero."""
        client.get("/point")
        response = client.post("/point", data={"x": "abc"})
        assert response.text == "point is (0.000000,0.000000)\n"


class TestAccessLog:
    """Test suite for the request log file."""

    def test_requests_are_logged(self, client_dir, tmp_path):
        """Each request appends one line with the configured fields."""
        log_path = tmp_path / "access.log"
        settings = Settings(
            client_dir=client_dir,
            custom_log=str(log_path),
            log_format=["method", "path", "status", "unknown"],
        )
        client = TestClient(create_app(settings, registry=new_registry()))

        client.get("/point")
        client.get("/goplot/graph.js")

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert lines == ["GET /point 200 -", "GET /goplot/graph.js 404 -"]

    def test_nolog_writes_nothing(self, client_dir):
        """The nolog setting disables the request log."""
        settings = Settings(client_dir=client_dir, custom_log="nolog")
        app = create_app(settings, registry=new_registry())

        assert not settings.access_log_enabled
        assert app.user_middleware == []
        assert TestClient(app).get("/point").status_code == 200

    def test_apps_keep_separate_log_files(self, client_dir, tmp_path):
        """Two applications with different log files each write to their own."""
        first_log = tmp_path / "first.log"
        second_log = tmp_path / "second.log"
        first = TestClient(create_app(
            Settings(client_dir=client_dir, custom_log=str(first_log), log_format=["path"]),
            registry=new_registry(),
        ))
        second = TestClient(create_app(
            Settings(client_dir=client_dir, custom_log=str(second_log), log_format=["path"]),
            registry=new_registry(),
        ))

        first.get("/point")
        second.get("/")
        first.get("/")

        assert first_log.read_text(encoding="utf-8").splitlines() == ["/point", "/"]
        assert second_log.read_text(encoding="utf-8").splitlines() == ["/"]
