def get_data(old_data):
    references = list(old_data.get("references", []))
    if "./tsconfig.vitest.json" not in references:
        references.append("./tsconfig.vitest.json")
    return {**old_data, "references": references}
