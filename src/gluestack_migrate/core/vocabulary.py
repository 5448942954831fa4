"""
Target Vocabulary Registry.

Static knowledge about the gluestack-ui component set:

- which module each component is exported from (``Box`` -> ``@/components/ui/box``),
- which components every migrated file imports regardless of use,
- which tags accept raw text and must therefore never get their text wrapped.
"""

from typing import Dict, FrozenSet, Optional, Tuple

DEFAULT_COMPONENT_ROOT = "@/components/ui"

# Component name -> module slug under the component root.
COMPONENT_MODULES: Dict[str, str] = {
  "Box": "box",
  "Text": "text",
  "Heading": "heading",
  "Pressable": "pressable",
  "Divider": "divider",
  "Button": "button",
  "ButtonText": "button",
  "ButtonIcon": "button",
  "ButtonSpinner": "button",
  "ButtonGroup": "button",
  "Input": "input",
  "InputField": "input",
  "InputSlot": "input",
  "InputIcon": "input",
  "TextArea": "textarea",
  "Select": "select",
  "SelectTrigger": "select",
  "SelectInput": "select",
  "SelectIcon": "select",
  "SelectContent": "select",
  "SelectItem": "select",
  "AlertDialog": "alert-dialog",
  "AlertDialogBackdrop": "alert-dialog",
  "AlertDialogContent": "alert-dialog",
  "Modal": "modal",
  "ModalBackdrop": "modal",
  "ModalContent": "modal",
  "Actionsheet": "actionsheet",
  "ActionsheetContent": "actionsheet",
  "Tooltip": "tooltip",
  "TooltipContent": "tooltip",
  "Tabs": "tabs",
  "TabsTabList": "tabs",
  "TabsTabPanels": "tabs",
  "Accordion": "accordion",
  "AccordionItem": "accordion",
  "AccordionHeader": "accordion",
  "AccordionTrigger": "accordion",
  "AccordionContent": "accordion",
  "Avatar": "avatar",
  "AvatarImage": "avatar",
  "AvatarGroup": "avatar",
  "AvatarFallbackText": "avatar",
  "Progress": "progress",
  "ProgressFilledTrack": "progress",
  "Alert": "alert",
  "AlertText": "alert",
  "AlertIcon": "alert",
  "Badge": "badge",
  "BadgeText": "badge",
  "BadgeIcon": "badge",
  "Checkbox": "checkbox",
  "RadioGroup": "radio",
  "Switch": "switch",
  "Slider": "slider",
  "Skeleton": "skeleton",
  "Toast": "toast",
  "FormControl": "form-control",
  "Menu": "menu",
  "Fab": "fab",
  "FabLabel": "fab",
  "FabIcon": "fab",
}

# Imported into every migrated file.
BASE_IMPORTS: Tuple[str, ...] = (
  "Box",
  "Text",
  "Heading",
  "Button",
  "ButtonText",
  "ButtonIcon",
  "Pressable",
  "Input",
  "InputField",
)

# Tags whose children are text by construction.
TEXT_CONTAINERS: FrozenSet[str] = frozenset(
  {
    "Text",
    "Heading",
    "ButtonText",
    "AlertText",
    "BadgeText",
    "FabLabel",
    "AvatarFallbackText",
    "Input",
    "InputField",
    "SelectInput",
    "TextArea",
    "Textarea",
    "textarea",
    "p",
    "span",
    "h1",
    "h2",
    "h3",
    "h4",
  }
)

ICON_LIBRARY = "lucide-react"
ICON_LIBRARY_TARGET = "lucide-react-native"
PLATFORM_MODULES: Tuple[str, ...] = ("react-native",)


def is_component(name: Optional[str]) -> bool:
  """Returns True if ``name`` is a known target component."""
  return name is not None and name in COMPONENT_MODULES


def module_for(name: str, root: str = DEFAULT_COMPONENT_ROOT) -> Optional[str]:
  """
  Resolves the module path a component is imported from.

  Args:
      name: Component name.
      root: Component root path.

  Returns:
      Optional[str]: e.g. '@/components/ui/alert-dialog', or None if unknown.
  """
  slug = COMPONENT_MODULES.get(name)
  if slug is None:
    return None
  return f"{root.rstrip('/')}/{slug}"
