"""
Tests for the ImportFixer: icon rewriting, platform pruning and component injection.
"""

from unittest.mock import patch

from gluestack_migrate.config import RuntimeConfig
from gluestack_migrate.core.import_fixer import ImportFixer
from gluestack_migrate.core.import_fixer.utils import (
  accepts_named,
  collect_used_components,
  find_declaration,
  get_signature,
  module_declares,
)
from gluestack_migrate.core.tracer import TraceEventType, TraceLogger
from gluestack_migrate.core.tree import ImportDeclaration, ImportSpecifier, build_document, el
from gluestack_migrate.enums import SpecifierKind

BASE_SIGNATURES = [
  "import { Box } from '@/components/ui/box'",
  "import { Text } from '@/components/ui/text'",
  "import { Heading } from '@/components/ui/heading'",
  "import { Button, ButtonText, ButtonIcon } from '@/components/ui/button'",
  "import { Pressable } from '@/components/ui/pressable'",
  "import { Input, InputField } from '@/components/ui/input'",
]


def _signatures(document):
  return [get_signature(d) for d in document.imports]


def test_base_table_on_empty_document():
  doc = build_document(el("Box"))
  tracer = TraceLogger()

  count = ImportFixer(RuntimeConfig(), tracer).fix(doc)

  assert _signatures(doc) == BASE_SIGNATURES
  assert count == 6
  assert all(e.type == TraceEventType.IMPORT_ACTION for e in tracer.events)
  assert {e.metadata["action"] for e in tracer.events} == {"insert"}


def test_used_components_follow_base_table():
  doc = build_document(el("Box", None, el("Select", None, el("SelectTrigger")), el("Divider"), el("Icon")))
  ImportFixer(RuntimeConfig()).fix(doc)

  assert _signatures(doc)[len(BASE_SIGNATURES) :] == [
    "import { Select, SelectTrigger } from '@/components/ui/select'",
    "import { Divider } from '@/components/ui/divider'",
  ]


def test_used_components_can_be_disabled():
  doc = build_document(el("Divider"))
  ImportFixer(RuntimeConfig(import_used_components=False)).fix(doc)
  assert _signatures(doc) == BASE_SIGNATURES


def test_existing_declaration_is_extended_not_duplicated():
  existing = ImportDeclaration.named("@/components/ui/button", "Button")
  other = ImportDeclaration.named("./local", "helper")
  doc = build_document(el("Box"), imports=[other, existing])
  tracer = TraceLogger()

  ImportFixer(RuntimeConfig(), tracer).fix(doc)

  assert get_signature(doc.imports[-1]) == "import { Button, ButtonText, ButtonIcon } from '@/components/ui/button'"
  assert get_signature(doc.imports[-2]) == "import { helper } from './local'"
  assert sum(1 for d in doc.imports if d.module == "@/components/ui/button") == 1
  adds = [e.metadata["names"] for e in tracer.events if e.metadata["action"] == "add"]
  assert adds == [["ButtonText"], ["ButtonIcon"]]


def test_namespace_import_is_not_extended():
  namespace = ImportDeclaration("@/components/ui/box", (ImportSpecifier("*", "ui", SpecifierKind.NAMESPACE),))
  doc = build_document(el("Box"), imports=[namespace])

  with patch("gluestack_migrate.core.import_fixer.log_debug") as mock_debug:
    ImportFixer(RuntimeConfig()).fix(doc)

  assert _signatures(doc) == BASE_SIGNATURES + ["import * as ui from '@/components/ui/box'"]
  assert "import { Box } from '@/components/ui/box'" in mock_debug.call_args[0][0]
  assert ImportFixer(RuntimeConfig()).fix(doc) == 0


def test_names_split_across_declarations_are_respected():
  first = ImportDeclaration.named("@/components/ui/input", "Input")
  second = ImportDeclaration.named("@/components/ui/input", "InputField")
  doc = build_document(el("Box"), imports=[first, second])

  ImportFixer(RuntimeConfig()).fix(doc)

  inputs = [d for d in doc.imports if d.module == "@/components/ui/input"]
  assert inputs == [first, second]


def test_icon_library_rewritten_and_platform_removed():
  icons = ImportDeclaration.named("lucide-react", "Search")
  platform = ImportDeclaration.named("react-native", "View")
  doc = build_document(el("Box"), imports=[platform, icons])
  tracer = TraceLogger()

  ImportFixer(RuntimeConfig(), tracer).fix(doc)

  assert get_signature(doc.imports[-1]) == "import { Search } from 'lucide-react-native'"
  assert find_declaration(doc.imports, "react-native") is None
  actions = [e.metadata["action"] for e in tracer.events]
  assert actions[:2] == ["remove", "rewrite"]


def test_component_root_is_configurable():
  doc = build_document(el("Box"))
  ImportFixer(RuntimeConfig(component_root="~/ui/")).fix(doc)
  assert doc.imports[0].module == "~/ui/box"


def test_fix_is_idempotent():
  doc = build_document(
    el("Box", None, el("Tooltip", None, el("TooltipContent"))),
    imports=[ImportDeclaration.named("lucide-react", "X"), ImportDeclaration.named("react-native", "View")],
  )
  ImportFixer(RuntimeConfig()).fix(doc)
  first = list(doc.imports)

  assert ImportFixer(RuntimeConfig()).fix(doc) == 0
  assert doc.imports == first


def test_utils():
  decls = [ImportDeclaration.named("a", "X"), ImportDeclaration.named("a", "Y")]
  assert find_declaration(decls, "a") == 0
  namespace_first = [ImportDeclaration("a", (ImportSpecifier("*", "ns", SpecifierKind.NAMESPACE),))] + decls
  assert not accepts_named(namespace_first[0])
  assert find_declaration(namespace_first, "a") == 0
  assert find_declaration(namespace_first, "a", extendable=True) == 1
  assert module_declares(decls, "a", "Y")
  assert not module_declares(decls, "b", "Y")

  mixed = ImportDeclaration(
    "ui",
    (
      ImportSpecifier("default", "UI", SpecifierKind.DEFAULT),
      ImportSpecifier("Box", "UIBox"),
    ),
  )
  assert get_signature(mixed) == "import UI, { Box as UIBox } from 'ui'"
  assert get_signature(ImportDeclaration("polyfill")) == "import 'polyfill'"
  namespace = ImportDeclaration("ui", (ImportSpecifier("*", "ui", SpecifierKind.NAMESPACE),))
  assert get_signature(namespace) == "import * as ui from 'ui'"


def test_collect_used_components_preorder():
  doc = build_document(el("Button", None, el("ButtonIcon"), el("ButtonText", None, "x")), el("Box"), el("Button"))
  assert collect_used_components(doc) == ["Button", "ButtonIcon", "ButtonText", "Box"]
