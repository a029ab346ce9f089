def get_data(old_data):
    references = list(old_data.get("references", []))
    for ref in ("./tsconfig.node.json", "./tsconfig.app.json"):
        if ref not in references:
            references.append(ref)
    return {**old_data, "references": references}
