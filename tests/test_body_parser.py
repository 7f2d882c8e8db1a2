# =============================================================================
# tests/test_body_parser.py - Body Parser Helper Tests
# =============================================================================
# The request-level behavior is covered through /register in test_bodies.py;
# these tests pin down the pure helpers.
# =============================================================================

import xml.etree.ElementTree as ET

import pytest

from lib.body_parser import media_type_of, xml_to_dict


class TestMediaTypeOf:

    def test_strips_parameters(self):
        assert media_type_of("multipart/form-data; boundary=abc") == "multipart/form-data"

    def test_lowercases(self):
        assert media_type_of("Application/JSON") == "application/json"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        assert media_type_of(value) == ""


class TestXmlToDict:

    def test_children_become_fields(self):
        body = b"<user><username> Brian </username><password>12345</password></user>"

        assert xml_to_dict(body) == {"username": "Brian", "password": "12345"}

    def test_namespace_is_dropped(self):
        body = b'<r xmlns="urn:x"><username>Brian</username><password>12345</password></r>'

        assert xml_to_dict(body) == {"username": "Brian", "password": "12345"}

    def test_empty_element(self):
        assert xml_to_dict(b"<r><username/></r>") == {"username": ""}

    def test_malformed(self):
        with pytest.raises(ET.ParseError):
            xml_to_dict(b"<r><username>")
