import unittest

from method_tracer import CallStatus, SimpleTracer, TracedMixin, trace_methods


class TestClass(TracedMixin):
    def greet(self, name):
        return f"Hello, {name}!"

    def fail_method(self):
        raise RuntimeError("Intentional failure")


class TraceMethodsTests(unittest.TestCase):
    def test_mixin_traces_and_logs(self) -> None:
        tracer = TestClass.trace_methods("greet", "fail_method", threshold=0.0, auto_output=True)
        instance = TestClass()

        with self.assertLogs("method_tracer.trace", level="INFO") as logs:
            self.assertEqual(instance.greet("World"), "Hello, World!")
            with self.assertRaises(RuntimeError) as ctx:
                instance.fail_method()

        self.assertIsInstance(tracer, SimpleTracer)
        self.assertEqual(str(ctx.exception), "Intentional failure")
        self.assertEqual(tracer.traced_methods, frozenset({"greet", "fail_method"}))
        self.assertEqual(len(logs.records), 2)
        self.assertTrue(logs.output[0].startswith("INFO:method_tracer.trace:TRACE: TestClass#greet took "))
        self.assertIn("[ERROR]", logs.output[1])
        self.assertTrue(logs.output[1].endswith("RuntimeError: Intentional failure"))

        results = tracer.fetch_results()
        self.assertEqual([call.status for call in results.calls], [CallStatus.SUCCESS, CallStatus.ERROR])

    def test_function_form_skips_missing_names(self) -> None:
        class Service:
            def call(self):
                return "ok"

        tracer = trace_methods(Service, "call", "missing", threshold=0.0)

        self.assertEqual(Service().call(), "ok")
        self.assertEqual(tracer.traced_methods, frozenset({"call"}))
        self.assertEqual(tracer.fetch_results().calls[0].qualified_name, "Service#call")

    def test_custom_sink(self) -> None:
        class Service:
            def call(self):
                return "ok"

        lines = []
        trace_methods(
            Service,
            "call",
            threshold=0.0,
            auto_output=True,
            sink=lambda level, line, record: lines.append(line),
        )
        Service().call()

        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("TRACE: Service#call took "))


if __name__ == "__main__":
    unittest.main()
