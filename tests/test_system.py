import types
import subprocess

import psutil

from quickfetch.modules.system import SystemModule, HardwareInfoModule

OS_RELEASE = """NAME="Zorin OS"
VERSION="17.1"
ID=zorin
PRETTY_NAME="Zorin OS 17.1"
"""

LSPCI = """00:00.0 Host bridge: Intel Corporation Device 9b61 (rev 0c)
00:02.0 VGA compatible controller: Intel Corporation CometLake-U GT2 [UHD Graphics] (rev 02)
01:00.0 3D controller: NVIDIA Corporation GP108M [GeForce MX250] (rev a1)
"""


def test_os_info_prefers_pretty_name(monkeypatch):
    module = SystemModule()
    monkeypatch.setattr("quickfetch.modules.system.platform.system", lambda: "Linux")
    monkeypatch.setattr(module, "safe_read_file", lambda path, filter_func=None: OS_RELEASE)

    assert module.get_os_info() == "Zorin OS 17.1"


def test_os_info_falls_back_to_name_then_linux(monkeypatch):
    module = SystemModule()
    monkeypatch.setattr("quickfetch.modules.system.platform.system", lambda: "Linux")

    monkeypatch.setattr(module, "safe_read_file", lambda path, filter_func=None: 'NAME="Arch Linux"\n')
    assert module.get_os_info() == "Arch Linux"

    monkeypatch.setattr(module, "safe_read_file", lambda path, filter_func=None: None)
    assert module.get_os_info() == "Linux"


def test_os_info_on_other_platforms(monkeypatch):
    monkeypatch.setattr("quickfetch.modules.system.platform.system", lambda: "Darwin")
    monkeypatch.setattr("quickfetch.modules.system.platform.release", lambda: "23.1.0")
    assert SystemModule().get_os_info() == "Darwin 23.1.0"

    monkeypatch.setattr("quickfetch.modules.system.platform.release", lambda: "")
    assert SystemModule().get_os_info() == "Darwin Unknown"


def test_kernel_and_arch_fallbacks(monkeypatch):
    monkeypatch.setattr("quickfetch.modules.system.platform.release", lambda: "")
    monkeypatch.setattr("quickfetch.modules.system.platform.machine", lambda: "")

    module = SystemModule()
    assert module.get_kernel_info() == "Unknown"
    assert module.get_arch_info() == "Unknown"


def test_uptime_is_hours_minutes_seconds(monkeypatch):
    now = 1_700_000_000.0
    monkeypatch.setattr("quickfetch.modules.system.time.time", lambda: now)
    monkeypatch.setattr("quickfetch.modules.system.psutil.boot_time", lambda: now - (27 * 3600 + 62))
    assert SystemModule().get_uptime_info() == "27h 1m 2s"


def test_uptime_falls_back_when_boot_time_unavailable(monkeypatch):
    def broken():
        raise psutil.Error("no boot time")

    monkeypatch.setattr("quickfetch.modules.system.psutil.boot_time", broken)
    assert SystemModule().get_uptime_info() == "Unknown"


def test_user_falls_back_when_unknown_uid(monkeypatch):
    def broken():
        raise KeyError("getpwuid(): uid not found")

    monkeypatch.setattr("quickfetch.modules.system.getpass.getuser", broken)
    assert SystemModule().get_user_info() == "Unknown"


def test_locale(clean_env):
    module = SystemModule()
    assert module.get_locale_info() == "Unknown"

    clean_env.setenv("LANG", "en_US.UTF-8")
    assert module.get_locale_info() == "en_US.UTF-8"


def test_system_run_contains_all_fields():
    fields = SystemModule().run()
    assert set(fields) == {"os", "kernel", "architecture", "uptime", "hostname", "user", "locale"}
    assert all(isinstance(value, str) for value in fields.values())


def test_cpu_info_reads_model_name(monkeypatch):
    module = HardwareInfoModule()
    cpuinfo = "processor\t: 0\nmodel name\t: AMD Ryzen 7 5800X 8-Core Processor\nprocessor\t: 1\n"

    def fake_read(path, filter_func=None):
        lines = cpuinfo.splitlines()
        return "\n".join(line for line in lines if filter_func is None or filter_func(line))

    monkeypatch.setattr(module, "safe_read_file", fake_read)
    monkeypatch.setattr("quickfetch.modules.system.psutil.cpu_count", lambda logical=True: 16)

    assert module.get_cpu_info() == ("AMD Ryzen 7 5800X 8-Core Processor", 16)


def test_cpu_info_fallbacks(monkeypatch):
    module = HardwareInfoModule()
    monkeypatch.setattr(module, "safe_read_file", lambda path, filter_func=None: None)
    monkeypatch.setattr("quickfetch.modules.system.platform.processor", lambda: "")
    monkeypatch.setattr("quickfetch.modules.system.psutil.cpu_count", lambda logical=True: None)

    assert module.get_cpu_info() == ("Unknown", 0)


def test_gpu_info_takes_first_display_controller(fake_commands):
    module = HardwareInfoModule()
    fake_commands(module, {("lspci",): LSPCI})

    assert module.get_gpu_info() == "Intel Corporation CometLake-U GT2 [UHD Graphics] (rev 02)"


def test_gpu_info_fallbacks(fake_commands):
    module = HardwareInfoModule()

    fake_commands(module, {})
    assert module.get_gpu_info() == "No GPU found"

    fake_commands(module, {("lspci",): "00:00.0 Host bridge: Intel Corporation Device\n"})
    assert module.get_gpu_info() == "No GPU found"


def test_memory_and_swap(monkeypatch):
    monkeypatch.setattr("quickfetch.modules.system.psutil.virtual_memory",
                        lambda: types.SimpleNamespace(total=16 * 1024 ** 3, used=4 * 1024 ** 3))
    monkeypatch.setattr("quickfetch.modules.system.psutil.swap_memory",
                        lambda: types.SimpleNamespace(total=2 * 1024 ** 3, used=0))

    module = HardwareInfoModule()
    assert module.get_memory_info() == (16 * 1024 ** 3, 4 * 1024 ** 3)
    assert module.get_swap_info() == (2 * 1024 ** 3, 0)


def test_memory_and_swap_fallback(monkeypatch):
    def broken():
        raise OSError("no /proc")

    monkeypatch.setattr("quickfetch.modules.system.psutil.virtual_memory", broken)
    monkeypatch.setattr("quickfetch.modules.system.psutil.swap_memory", broken)

    module = HardwareInfoModule()
    assert module.get_memory_info() == (0, 0)
    assert module.get_swap_info() == (0, 0)


def test_hostname_falls_back_when_unavailable(monkeypatch):
    def broken():
        raise OSError("no hostname")

    monkeypatch.setattr("quickfetch.modules.system.socket.gethostname", broken)
    assert SystemModule().get_hostname_info() == "Unknown"


def test_gpu_info_survives_invalid_utf8(monkeypatch):
    lspci = b"00:02.0 VGA compatible controller: Caf\xe9 GPU\n"

    def fake_run(command, **kwargs):
        stdout = lspci.decode("utf-8", errors=kwargs.get("errors", "strict"))
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")

    monkeypatch.setattr("quickfetch.modules.base.subprocess.run", fake_run)
    assert HardwareInfoModule().get_gpu_info() == "Caf\ufffd GPU"
