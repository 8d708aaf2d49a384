"""
Tests for the XML formatter.
"""

import xml.etree.ElementTree as ET

import pytest

from moddocs.format import RenderSettings, XMLFormatter


@pytest.mark.unit
class TestXMLFormatter:
    """Test XMLFormatter.render()."""

    def test_document(self, sample_module):
        settings = RenderSettings()

        root = ET.fromstring(XMLFormatter(settings).render(sample_module, settings))

        assert root.tag == "module"
        assert [child.tag for child in root] == [
            "header",
            "inputs",
            "outputs",
            "providers",
            "requirements",
        ]
        first = root.find("inputs/input")
        assert first.findtext("name") == "bucket_name"
        assert first.findtext("required") == "true"
        assert first.findtext("default") == ""
        region = root.findall("inputs/input")[1]
        assert region.findtext("default") == '"us-east-1"'
        assert root.findall("providers/provider")[1].findtext("alias") == "ident"

    def test_indented(self, sample_module):
        settings = RenderSettings()
        text = XMLFormatter(settings).render(sample_module, settings)
        assert text.startswith("<module>\n  <header>Example module</header>\n")

    def test_hidden_sections_empty(self, sample_module):
        settings = RenderSettings(show_outputs=False)
        root = ET.fromstring(XMLFormatter(settings).render(sample_module, settings))
        assert root.findall("outputs/output") == []
