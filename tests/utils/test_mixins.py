import logging

from glasscompass.utils.mixins import LoggingMixin


class Foo(LoggingMixin):
    pass


def test_logger_name():
    assert Foo().logger.name == f'{__name__}.Foo'
    assert Foo('sub').logger.name == f'{__name__}.Foo.sub'


def test_class_loggers_propagate_to_package(caplog):
    from glasscompass.animation import HeadingAnimator

    caplog.set_level(logging.DEBUG, logger='glasscompass')
    animator = HeadingAnimator()
    animator.set_heading(0.)
    animator.set_heading(90.)
    assert 'Animating heading from 0.0 to 90.0' in caplog.text
