from unittest import TestSuite, TestLoader


def test_suite():

    from multimethods.tests import test_equality, test_index, test_registry
    from multimethods.tests import test_functions

    load = TestLoader().loadTestsFromModule

    return TestSuite([
        load(test_equality),
        load(test_index),
        load(test_registry),
        load(test_functions),
    ])
