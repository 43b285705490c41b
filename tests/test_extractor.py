"""Tests for import specifier extraction."""

from ts_depgraph.extractor import extract_specifiers, filter_candidates, is_candidate, strip_comments
from ts_depgraph.resolver.aliases import AliasTable


def test_static_import_forms():
    source = '''
import Default from "./default";
import { a, b as c } from './named';
import * as ns from "./namespace";
import Mixed, { x } from "./mixed";
import type { T } from "./types";
import {
  multi,
  line,
} from "./multiline";
import "./side-effect";
'''
    assert extract_specifiers(source) == {
        "./default", "./named", "./namespace", "./mixed",
        "./types", "./multiline", "./side-effect",
    }


def test_reexports():
    source = '''
export { functionB } from "./b";
export * from "./c";
export * as helpers from "./helpers";
export const local = 1;
'''
    assert extract_specifiers(source) == {"./b", "./c", "./helpers"}


def test_dynamic_import_and_require():
    source = '''
const lazy = await import("./lazy");
const tmpl = import(`./template`);
const fs = require("fs");
const cfg = require( './config' );
const computed = import(base + "/x");
'''
    assert extract_specifiers(source) == {"./lazy", "./template", "fs", "./config"}


def test_duplicates_collapse():
    source = '''
import { a } from "./dup";
import { b } from "./dup";
export * from "./dup";
'''
    assert extract_specifiers(source) == {"./dup"}


def test_comments_are_ignored():
    source = '''
// import { gone } from "./line-comment";
/* import { gone } from "./block-comment"; */
/**
 * require("./doc-comment")
 */
import { kept } from "./kept"; // trailing comment
'''
    assert extract_specifiers(source) == {"./kept"}


def test_strip_comments_keeps_strings():
    source = 'const url = "http://example.com"; // gone\nconst glob = "@/*";'
    clean = strip_comments(source)
    assert '"http://example.com"' in clean
    assert '"@/*"' in clean
    assert "gone" not in clean


def test_member_call_named_import_is_not_an_import():
    assert extract_specifiers('loader.import("./not-an-import");') == set()


def test_is_candidate():
    aliases = AliasTable.from_mapping({"@lib": ["lib/index"], "~/*": ["src/*"]})
    assert is_candidate("./a")
    assert is_candidate("../a")
    assert is_candidate("/abs/path")
    assert is_candidate("example/a")
    assert is_candidate("@scope/pkg")
    assert is_candidate("@lib", aliases)
    assert not is_candidate("@lib")
    assert not is_candidate("react", aliases)
    assert not is_candidate("lodash")


def test_filter_candidates_drops_packages():
    found = {"react", "./a", "lodash", "@lib"}
    aliases = AliasTable.from_mapping({"@lib": ["lib/common"]})
    assert filter_candidates(found, aliases) == ["./a", "@lib"]
