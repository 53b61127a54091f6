#!/usr/bin/env python3
"""
Tests for action-program construction and initial queues.
"""

from __future__ import annotations

import unittest

from documents.parser import parse_network
from documents.samples import EXAMPLE_NETWORK
from sim.entities import Drive, Wait
from sim.errors import UnknownStreet
from sim.network import RoadNetwork
from sim.route_plan import build_program, plan_routes


class RoutePlanTests(unittest.TestCase):
    def setUp(self) -> None:
        self.doc = parse_network(EXAMPLE_NETWORK)
        self.network = RoadNetwork.from_document(self.doc)

    def test_example_programs(self) -> None:
        plan = plan_routes(self.doc, self.network)

        self.assertEqual(
            list(plan.cars[0].program),
            [Wait(0), Drive(1, 1), Wait(1), Drive(4, 3), Wait(4), Drive(3, 2)],
        )
        self.assertEqual(
            list(plan.cars[1].program),
            [Wait(2), Drive(4, 3), Wait(4), Drive(0, 1)],
        )
        self.assertEqual({s: list(q) for s, q in plan.queues.items()}, {0: [0], 2: [1]})

    def test_programs_end_with_a_drive(self) -> None:
        program = build_program(["rue-de-rome", "rue-de-moscou"], self.network)
        self.assertEqual(list(program), [Wait(3), Drive(4, 3)])

    def test_single_street_route_is_empty_and_not_queued(self) -> None:
        doc = parse_network("5 2 1 1 10\n0 1 a 3\n1 a\n")
        plan = plan_routes(doc, RoadNetwork.from_document(doc))

        self.assertEqual(len(plan.cars[0].program), 0)
        self.assertEqual(plan.queues, {})

    def test_shared_start_street_queues_in_car_order(self) -> None:
        doc = parse_network("5 3 2 3 10\n0 1 a 1\n1 2 b 1\n2 a b\n2 a b\n2 a b\n")
        plan = plan_routes(doc, RoadNetwork.from_document(doc))
        self.assertEqual(list(plan.queues[0]), [0, 1, 2])

    def test_unknown_street(self) -> None:
        with self.assertRaises(UnknownStreet) as ctx:
            build_program(["rue-de-londres", "champs-elysees"], self.network, "route of car 9")
        self.assertEqual(ctx.exception.name, "champs-elysees")
        self.assertIn("car 9", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
