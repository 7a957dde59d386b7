"""
Services Layer

Pure bracket engine functions that:
- Accept a BracketSnapshot (plus plain ids/colors where needed)
- Return freshly built results (dataclasses with to_dict, or models)
- Do NOT depend on HTTP request/response objects
- Do NOT mutate the snapshot or keep state between calls
"""
