# visadesk/engine/docs.py
from typing import Callable, Dict

from .scheme_config import get_scheme_config

# conditional document keys -> profile predicate
CONDITIONS: Dict[str, Callable] = {
    "topik": lambda p: p.topik_level > 0,
    "kiip": lambda p: p.kiip_level > 0,
    "korean_spouse": lambda p: p.has_korean_spouse,
    "minor_child": lambda p: p.has_minor_child,
    "volunteer": lambda p: p.volunteer_hours > 0,
    "special_merit": lambda p: p.has_special_merit,
    "work_experience": lambda p: p.work_experience_years > 0,
    "national_cert": lambda p: p.has_national_cert,
    "innopolis": lambda p: p.is_innopolis_company,
    "korean_language": lambda p: p.korean_language != "none",
    "pr_test": lambda p: p.passed_pr_test,
    "assets": lambda p: p.assets > 0,
    "children": lambda p: p.children_count > 0,
    "household_assets": lambda p: p.household_assets > 0,
    "housing": lambda p: p.has_housing,
    "scholarship": lambda p: p.scholarship_fraction > 0,
    "english": lambda p: p.english_proficiency,
    "skills_test": lambda p: p.passed_skills_test,
    "ip": lambda p: p.has_ip,
    "office_lease": lambda p: p.has_office_lease,
    "korean_employees": lambda p: p.korean_employees > 0,
}


def get_document_checklist(scheme_code: str, profile) -> list[str]:
    """
    Generates documents dynamically from scheme_config.py:
    base list, sub-type extras, profile-driven extras, closing list.
    """
    doc_rules = get_scheme_config(scheme_code)["documents"]
    values = profile.model_dump()

    # 1. Always add base documents
    final_list = list(doc_rules.get("base", []))

    # 2. Sub-type (or sector) specific documents
    final_list.extend(doc_rules.get("sub_types", {}).get(profile.variant, []))

    # 3. Documents that depend on what the applicant claims
    for key, entries in doc_rules.get("conditional", {}).items():
        if CONDITIONS[key](profile):
            final_list.extend(entry.format(**values) for entry in entries)

    final_list.extend(doc_rules.get("closing", []))

    # order preserving de-duplication
    return list(dict.fromkeys(final_list))
