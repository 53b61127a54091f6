#!/usr/bin/env python3
"""
Parser tests: the worked example documents and malformed inputs.
"""

from __future__ import annotations

import os
import tempfile
import unittest

from documents.errors import DocumentError
from documents.parser import load_network, load_schedule, parse_network, parse_schedule
from documents.samples import EXAMPLE_NETWORK, EXAMPLE_SCHEDULE


class NetworkParserTests(unittest.TestCase):
    def test_example_network(self) -> None:
        doc = parse_network(EXAMPLE_NETWORK)

        self.assertEqual(doc.header.simulation_duration, 6)
        self.assertEqual(doc.header.intersections, 4)
        self.assertEqual(doc.header.bonus, 1000)
        self.assertEqual(
            [s.name for s in doc.streets],
            ["rue-de-londres", "rue-d-amsterdam", "rue-d-athenes",
             "rue-de-rome", "rue-de-moscou"],
        )
        rome = doc.streets[3]
        self.assertEqual(
            (rome.intersection_start, rome.intersection_end, rome.length), (2, 3, 2),
        )
        self.assertEqual(
            doc.car_paths[1].street_names,
            ["rue-d-athenes", "rue-de-moscou", "rue-de-londres"],
        )

    def test_missing_final_newline_is_accepted(self) -> None:
        doc = parse_network(EXAMPLE_NETWORK.rstrip("\n"))
        self.assertEqual(len(doc.car_paths), 2)

    def _assert_error(self, text: str, line, field=None) -> DocumentError:
        with self.assertRaises(DocumentError) as ctx:
            parse_network(text, path="net.txt")
        err = ctx.exception
        self.assertEqual(err.path, "net.txt")
        self.assertEqual(err.line, line, msg=str(err))
        if field is not None:
            self.assertEqual(err.field, field, msg=str(err))
        return err

    def test_non_numeric_header_field(self) -> None:
        text = EXAMPLE_NETWORK.replace("6 4 5 2 1000", "6 4 five 2 1000")
        err = self._assert_error(text, 1, "streets")
        self.assertIn("net.txt:1", str(err))

    def test_wrong_field_count(self) -> None:
        text = EXAMPLE_NETWORK.replace("3 1 rue-d-athenes 1", "3 1 rue-d-athenes")
        self._assert_error(text, 4, "street")

    def test_double_space_is_rejected(self) -> None:
        text = EXAMPLE_NETWORK.replace("2 3 rue-de-rome 2", "2 3  rue-de-rome 2")
        self._assert_error(text, 5)

    def test_truncated_document(self) -> None:
        lines = EXAMPLE_NETWORK.splitlines(keepends=True)
        err = self._assert_error("".join(lines[:-1]), 8)
        self.assertIn("unexpected end", err.reason)

    def test_trailing_content(self) -> None:
        self._assert_error(EXAMPLE_NETWORK + "\n1 rue-de-rome\n", 10)

    def test_car_path_count_mismatch(self) -> None:
        text = EXAMPLE_NETWORK.replace(
            "3 rue-d-athenes rue-de-moscou rue-de-londres",
            "4 rue-d-athenes rue-de-moscou rue-de-londres",
        )
        self._assert_error(text, 8, "car path")

    def test_empty_car_path(self) -> None:
        text = EXAMPLE_NETWORK.replace(
            "3 rue-d-athenes rue-de-moscou rue-de-londres", "0",
        )
        self._assert_error(text, 8, "street_names")

    def test_intersection_out_of_range(self) -> None:
        text = EXAMPLE_NETWORK.replace("1 2 rue-de-moscou 3", "1 9 rue-de-moscou 3")
        self._assert_error(text, 6, "intersection_end")

    def test_zero_length_street(self) -> None:
        text = EXAMPLE_NETWORK.replace("2 3 rue-de-rome 2", "2 3 rue-de-rome 0")
        self._assert_error(text, 5, "length")

    def test_duplicate_street_name(self) -> None:
        text = EXAMPLE_NETWORK.replace("2 3 rue-de-rome 2", "2 3 rue-de-moscou 2")
        err = self._assert_error(text, None)
        self.assertIn("declared twice", str(err))


class ScheduleParserTests(unittest.TestCase):
    def test_example_schedule(self) -> None:
        doc = parse_schedule(EXAMPLE_SCHEDULE)

        self.assertEqual([b.intersection_id for b in doc.intersections], [1, 0, 2])
        first = doc.intersections[0]
        self.assertEqual(
            [(l.street_name, l.duration) for l in first.lights],
            [("rue-d-athenes", 2), ("rue-d-amsterdam", 1)],
        )
        self.assertEqual(first.period, 3)

    def test_zero_duration(self) -> None:
        text = EXAMPLE_SCHEDULE.replace("rue-de-londres 2", "rue-de-londres 0")
        with self.assertRaises(DocumentError) as ctx:
            parse_schedule(text)
        self.assertEqual(ctx.exception.line, 8)

    def test_truncated_block(self) -> None:
        with self.assertRaises(DocumentError) as ctx:
            parse_schedule("1\n1\n2\nrue-d-athenes 2\n")
        self.assertEqual(ctx.exception.line, 5)

    def test_duplicate_intersection(self) -> None:
        text = "2\n1\n1\nrue-d-athenes 2\n1\n1\nrue-d-amsterdam 1\n"
        with self.assertRaises(DocumentError) as ctx:
            parse_schedule(text)
        self.assertIsNone(ctx.exception.line)
        self.assertIn("scheduled twice", str(ctx.exception))

    def test_street_listed_twice_in_block(self) -> None:
        text = "1\n1\n2\nrue-d-athenes 2\nrue-d-athenes 1\n"
        with self.assertRaises(DocumentError) as ctx:
            parse_schedule(text)
        self.assertEqual(ctx.exception.line, 2)

    def test_negative_number(self) -> None:
        with self.assertRaises(DocumentError) as ctx:
            parse_schedule("1\n-1\n1\nrue-d-athenes 2\n")
        self.assertEqual(ctx.exception.field, "intersection_id")

    def test_block_without_lights(self) -> None:
        doc = parse_schedule("2\n1\n0\n0\n1\nrue-de-londres 2\n")

        self.assertEqual([b.intersection_id for b in doc.intersections], [1, 0])
        self.assertEqual(doc.intersections[0].lights, [])
        self.assertEqual(doc.intersections[0].period, 0)


class FileLoadingTests(unittest.TestCase):
    def test_load_from_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            net_path = os.path.join(tmp, "a.txt")
            sched_path = os.path.join(tmp, "a.out")
            with open(net_path, "w", encoding="utf-8") as fh:
                fh.write(EXAMPLE_NETWORK)
            with open(sched_path, "w", encoding="utf-8") as fh:
                fh.write(EXAMPLE_SCHEDULE)

            self.assertEqual(len(load_network(net_path).streets), 5)
            self.assertEqual(len(load_schedule(sched_path).intersections), 3)

    def test_error_names_the_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "broken.out")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("x\n")
            with self.assertRaises(DocumentError) as ctx:
                load_schedule(path)
            self.assertEqual(ctx.exception.path, path)

    def test_invalid_utf8_is_a_document_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "latin1.out")
            with open(path, "wb") as fh:
                fh.write(b"1\n1\n1\nrue-d-\xff 2\n")
            with self.assertRaises(DocumentError) as ctx:
                load_schedule(path)
            self.assertEqual(ctx.exception.path, path)
            self.assertIsNone(ctx.exception.line)
            self.assertIn("not valid UTF-8", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
