def get_data(old_data):
    return {**old_data, "extras": list(old_data.get("extras", []))}
