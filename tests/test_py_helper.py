import io
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from stdkit.exceptions import InvalidCallableError
from stdkit.schema import RuntimeInfo
from stdkit.utils import py_helper
from stdkit.utils.timer import Timer, timer


class Server:
    def __init__(self):
        self.host = ""
        self.port = 0
        self.calls = []

    def set_port(self, port):
        self.calls.append("set_port")
        self.port = int(port)

    def greet(self, name):
        return f"hi {name}"

    @staticmethod
    def add(a, b):
        return a + b


class Callable2:
    def __call__(self, x):
        return x * 2


def test_value():
    assert py_helper.value(3) == 3
    assert py_helper.value(lambda: "lazy") == "lazy"


def test_call_forms():
    assert py_helper.call(len, "abc") == 3
    assert py_helper.call(Callable2(), 4) == 8
    assert py_helper.call("os.path.join", "a", "b") == os.path.join("a", "b")
    assert py_helper.call("stdkit.utils.case_convert:CaseConverter.to_snake_case", "RangePrice") == "range_price"
    assert py_helper.call((Server(), "greet"), "bob") == "hi bob"
    assert py_helper.call((Server, "add"), 1, 2) == 3
    assert py_helper.call_by_array(Server.add, [3, 4]) == 7


def test_call_invalid():
    for cb in ["no_module_here", "os.path.not_a_function", (Server(), "missing"), 42]:
        try:
            py_helper.call(cb)
            assert False, f"{cb!r} should not be callable"
        except InvalidCallableError:
            pass


def test_init_object():
    server = py_helper.init_object(Server(), {"host": "localhost", "port": "8080", "debug": True})
    assert server.host == "localhost"
    assert server.port == 8080
    assert server.calls == ["set_port"]
    assert server.debug is True


def test_runtime():
    start_time = time.time()
    start_mem = py_helper.memory_usage()
    info = py_helper.runtime(start_time, start_mem, {"name": "job"})

    assert isinstance(info, RuntimeInfo)
    assert info.start_time == start_time
    assert info.end_time >= start_time
    assert info.runtime.endswith("ms")
    assert info.memory.endswith("kb")
    assert info.peak_memory.endswith("Mb")
    assert info.model_extra["name"] == "job"
    assert info.end_memory > 0

    assert py_helper.runtime(start_time).memory is None


def test_dump_helpers():
    dumped = py_helper.dump_vars([1, 2], 3.5)
    assert dumped == "list(2) [1, 2]\nfloat(3.5)\n"

    printed = py_helper.print_vars({"b": 1, "a": 2}, "x")
    assert printed == "{'b': 1, 'a': 2}" + os.linesep + "'x'" + os.linesep

    long_dict = {f"key_{i}": list(range(10)) for i in range(5)}
    exported = py_helper.export_var(long_dict)
    assert "\n" not in exported
    assert eval(exported) == long_dict


def test_memory_stream_and_env():
    assert isinstance(py_helper.new_memory_stream(), io.BytesIO)
    assert isinstance(py_helper.new_memory_stream("r+"), io.StringIO)

    os.environ["STDKIT_TEST_PARAM"] = "on"
    try:
        assert py_helper.env_param("stdkit_test_param") == "on"
    finally:
        del os.environ["STDKIT_TEST_PARAM"]
    assert py_helper.env_param("stdkit_test_param", "off") == "off"


def test_timer_context():
    with Timer("block", use_log=False) as t:
        sum(range(1000))

    assert t.info is not None
    assert t.info.model_extra["name"] == "block"
    assert t.info.runtime.endswith("ms")


def test_timer_decorator():
    @timer
    def work(x):
        return x + 1

    assert work(1) == 2
    assert work.__name__ == "work"


if __name__ == "__main__":
    test_value()
    test_call_forms()
    test_call_invalid()
    test_init_object()
    test_runtime()
    test_dump_helpers()
    test_memory_stream_and_env()
    test_timer_context()
    test_timer_decorator()
    print("All tests passed!")
