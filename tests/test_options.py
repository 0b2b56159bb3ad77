import unittest
from http import HTTPStatus

from pyapidoc.options import ApiDocOptions


class TestOptions(unittest.TestCase):
    def test_defaults(self) -> None:
        options = ApiDocOptions.from_mapping({})
        self.assertEqual(options, ApiDocOptions())
        self.assertFalse(options.resource)
        self.assertIsNone(options.authentication)

    def test_recognized(self) -> None:
        options = ApiDocOptions.from_mapping(
            {
                "resource": True,
                "description": "Lists all students.",
                "input": "StudentForm",
                "output": "Student",
                "statusCodes": {HTTPStatus.OK: "Returned when successful"},
                "authentication": True,
                "section": "Students",
            }
        )
        self.assertTrue(options.resource)
        self.assertEqual(options.description, "Lists all students.")
        self.assertEqual(options.input, "StudentForm")
        self.assertEqual(options.output, "Student")
        self.assertEqual(options.status_codes, {HTTPStatus.OK: "Returned when successful"})
        self.assertTrue(options.authentication)
        self.assertEqual(options.section, "Students")

    def test_field_names_ignored(self) -> None:
        options = ApiDocOptions.from_mapping({"status_codes": {404: "Not found"}})
        self.assertIsNone(options.status_codes)

        options = ApiDocOptions.from_mapping({"statusCodes": {200: "OK"}, "status_codes": {404: "Not found"}})
        self.assertEqual(options.status_codes, {200: "OK"})

        options = ApiDocOptions.from_mapping({"status_codes": {404: "Not found"}, "statusCodes": {200: "OK"}})
        self.assertEqual(options.status_codes, {200: "OK"})

    def test_boolean_coercion(self) -> None:
        options = ApiDocOptions.from_mapping({"resource": 1, "authentication": ""})
        self.assertIs(options.resource, True)
        self.assertIs(options.authentication, False)

    def test_none_is_absent(self) -> None:
        options = ApiDocOptions.from_mapping({"description": None, "authentication": None, "resource": None})
        self.assertIsNone(options.description)
        self.assertIsNone(options.authentication)
        self.assertFalse(options.resource)

    def test_unknown_keys(self) -> None:
        with self.assertLogs("pyapidoc.options", level="DEBUG") as captured:
            options = ApiDocOptions.from_mapping({"deprecated": True, "aliases": {}, "section": "Students"})
        self.assertEqual(options, ApiDocOptions(section="Students"))
        self.assertEqual(len(captured.records), 2)

    def test_type_mismatch(self) -> None:
        with self.assertRaises(TypeError):
            ApiDocOptions.from_mapping({"filters": {"name": "page"}})
        with self.assertRaises(TypeError):
            ApiDocOptions.from_mapping({"statusCodes": ["Returned when successful"]})


if __name__ == "__main__":
    unittest.main()
