"""Tests for novafetch.sensors."""

from unittest.mock import MagicMock, patch

from novafetch.sensors import (
    Reading,
    cpu_temperature,
    gpu_name_from_sensors,
    gpu_temperature,
    is_generic_gpu_name,
    read_sensors,
)


class TestReadSensors:
    @patch("novafetch.sensors.psutil.sensors_temperatures")
    def test_flattens_chips(self, mock_temps: MagicMock) -> None:
        mock_temps.return_value = {
            "coretemp": [MagicMock(current=65.0, label="Package id 0")],
            "amdgpu": [MagicMock(current=48.0, label="edge"), MagicMock(current=None, label="mem")],
        }
        readings = read_sensors()
        assert [r.name for r in readings] == ["coretemp Package id 0", "amdgpu edge"]

    @patch("novafetch.sensors.psutil.sensors_temperatures")
    def test_empty_label(self, mock_temps: MagicMock) -> None:
        mock_temps.return_value = {"k10temp": [MagicMock(current=50.0, label="")]}
        assert read_sensors()[0].name == "k10temp"

    @patch("novafetch.sensors.psutil.sensors_temperatures", side_effect=AttributeError)
    def test_not_available(self, mock_temps: MagicMock) -> None:
        assert read_sensors() == []


class TestCpuTemperature:
    def test_averages_matching(self) -> None:
        readings = [
            Reading("coretemp", "Package id 0", 60.0),
            Reading("coretemp", "Core 0", 80.0),
            Reading("k10temp", "Tctl", 50.0),
        ]
        # "coretemp" matches every coretemp entry
        assert cpu_temperature(readings) == (60.0 + 80.0 + 50.0) / 3

    def test_no_match(self) -> None:
        assert cpu_temperature([Reading("acpitz", "", 40.0)]) is None

    def test_ignores_invalid(self) -> None:
        assert cpu_temperature([Reading("k10temp", "Tctl", 250.0)]) is None

    @patch("novafetch.sensors.psutil.sensors_temperatures", return_value={})
    def test_reads_when_not_given(self, mock_temps: MagicMock) -> None:
        assert cpu_temperature() is None
        mock_temps.assert_called_once()


class TestGpuTemperature:
    def test_prefers_edge(self) -> None:
        readings = [Reading("amdgpu", "junction", 70.0), Reading("amdgpu", "edge", 50.0)]
        assert gpu_temperature(readings) == 50.0

    def test_other_before_junction(self) -> None:
        readings = [Reading("amdgpu", "junction", 70.0), Reading("nvidia", "", 45.0)]
        assert gpu_temperature(readings) == 45.0

    def test_junction_last(self) -> None:
        assert gpu_temperature([Reading("amdgpu", "junction", 70.0)]) == 70.0

    def test_cpu_sensors_ignored(self) -> None:
        assert gpu_temperature([Reading("coretemp", "Package id 0", 60.0)]) is None


class TestGpuNameFromSensors:
    def test_skips_probe_labels(self) -> None:
        readings = [Reading("amdgpu", "edge", 50.0), Reading("nvidia", "NVIDIA RTX A4000", 40.0)]
        assert gpu_name_from_sensors(readings) == "NVIDIA RTX A4000"

    def test_rejects_generic(self) -> None:
        assert gpu_name_from_sensors([Reading("gpu", "GPU", 40.0)]) is None

    def test_generic_names(self) -> None:
        assert is_generic_gpu_name("")
        assert is_generic_gpu_name("gpu")
        assert is_generic_gpu_name("Unknown device")
        assert is_generic_gpu_name("abc")
        assert not is_generic_gpu_name("Radeon RX 580")
