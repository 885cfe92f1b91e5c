from modular_pages.domain.modules.classifier import classify, invalid_reason, module_type
from modular_pages.domain.modules.types import ModuleVariant, PLACEMENTS
from .exceptions import InvariantViolation

def assert_module(module, publish=False):
    record = module.to_record()

    if module_type(record) is None:
        raise InvariantViolation(f"Unknown module type: {module.type}")

    if module.placement is not None and module.placement not in PLACEMENTS:
        raise InvariantViolation(
            f"Module placement must be one of {PLACEMENTS}, got {module.placement!r}"
        )

    # Drafts may be incomplete; published content must render
    if publish and classify(record) is ModuleVariant.INVALID:
        raise InvariantViolation(invalid_reason(record))
