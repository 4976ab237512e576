"""Shared fixtures: inline TLD documents and element helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import Tag

from tld_parser.document import load_document, root_element

EXAMPLE_TLD = """\
<?xml version="1.0" encoding="UTF-8"?>
<taglib xmlns="http://java.sun.com/xml/ns/javaee" version="2.1">
  <!-- dateCreated="2016-01-01T00:00:00Z" -->
  <!-- dateModified="2017-03-04T00:00:00Z" -->
  <description>Example tags.</description>
  <display-name>Example</display-name>
  <tlib-version>1.0</tlib-version>
  <short-name>ex</short-name>
  <uri>https://example.com/taglib</uri>
  <tag>
    <!-- dateCreated="2016-06-01T00:00:00Z" -->
    <!-- datePublished="2016-07-01T00:00:00Z" -->
    <!-- allowRobots="false" -->
    <description>&lt;p class="summary"&gt;Prints a value.&lt;/p&gt;&lt;p&gt;Details.&lt;/p&gt;</description>
    <name>out</name>
    <tag-class>com.example.OutTag</tag-class>
    <body-content>empty</body-content>
    <attribute>
      <!-- type="java.util.Map<String,Object>" -->
      <description>The value.</description>
      <name>value</name>
      <required>true</required>
      <rtexprvalue>TRUE</rtexprvalue>
      <type>java.util.Map</type>
    </attribute>
    <attribute>
      <name>action</name>
      <deferred-method>
        <!-- methodSignature="void action(java.util.List<String>)" -->
        <method-signature>void action(java.util.List)</method-signature>
      </deferred-method>
    </attribute>
    <attribute>
      <name>bean</name>
      <deferred-value>
        <!-- type = 'java.util.Set<java.util.Map<String,Integer>>' -->
        <type>java.util.Set</type>
      </deferred-value>
    </attribute>
    <dynamic-attributes>true</dynamic-attributes>
  </tag>
  <tag>
    <name>plain</name>
    <tag-class>com.example.PlainTag</tag-class>
    <body-content>scriptless</body-content>
  </tag>
  <function>
    <!-- dateCreated="2016-02-01T00:00:00Z" -->
    <!-- functionSignature="java.util.List<String> split(java.lang.String)" -->
    <name>split</name>
    <function-class>com.example.Functions</function-class>
    <function-signature>java.util.List split(java.lang.String)</function-signature>
  </function>
</taglib>
"""


def element(xml: str) -> Tag:
    """Root element of an inline XML snippet."""
    return next(c for c in load_document(xml).children if isinstance(c, Tag))


def taglib_xml(body: str, root_comments: str = "") -> str:
    return (
        '<taglib xmlns="http://java.sun.com/xml/ns/javaee">'
        f"{root_comments}<tlib-version>1.0</tlib-version><short-name>t</short-name>"
        f"{body}</taglib>"
    )


@pytest.fixture
def example_tld(tmp_path: Path) -> Path:
    path = tmp_path / "example.tld"
    path.write_text(EXAMPLE_TLD, encoding="utf-8")
    return path


@pytest.fixture
def example_root() -> Tag:
    return root_element(load_document(EXAMPLE_TLD))


@pytest.fixture
def make_element():
    return element


@pytest.fixture
def make_taglib_xml():
    return taglib_xml
