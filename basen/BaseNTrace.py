import contextlib
from opentelemetry import trace
from opentelemetry import metrics
"""
Usage:
    with <trace>.span("basen.name") as span:
        ...
        span.set_attribute("basen.key", "value")
"""


class BaseNTrace(object):

    def __init__(self,
                 name: str = __name__,
                 tracer: trace.Tracer | None = None,
                 meter: metrics.Meter | None = None):
        self.init(name, tracer, meter)

    def init(self, name: str, tracer: trace.Tracer | None,
             meter: metrics.Meter | None) -> None:
        if hasattr(self, 'trace_provider'):
            trace.set_tracer_provider(self.trace_provider)
        if hasattr(self, 'meter_provider'):
            metrics.set_meter_provider(self.meter_provider)

        if not tracer:
            tracer = trace.get_tracer(name)
        self.tracer = tracer

        if not meter:
            meter = metrics.get_meter(name)
        self.meter = meter

    def span(self,
             name: str) -> contextlib.AbstractContextManager[trace.span.Span]:
        return self.tracer.start_as_current_span(name)

    def counter(self, name: str, description: str = '') -> metrics.Counter:
        return self.meter.create_counter(name, unit='1',
                                         description=description)

    def get_current_span(self) -> trace.span.Span:
        return trace.get_current_span()
