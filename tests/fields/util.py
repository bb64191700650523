import json
from pathlib import Path


def costs(cs, operation) -> tuple:
    """Run `operation(cs)` and return its output with the number of constraints and wires it added to `cs`."""
    root = cs.root
    constraints_before, aux_before = root.num_constraints(), root.num_aux()
    out = operation(cs)
    return out, root.num_constraints() - constraints_before, root.num_aux() - aux_before


def save_constraint_system(cs, save_to_json_folder, filename, test_name):
    if save_to_json_folder:
        output_dir = Path("data") / save_to_json_folder / "fields"
        output_dir.mkdir(parents=True, exist_ok=True)
        json_file = output_dir / f"{filename}.json"

        data = {}

        if json_file.exists():
            with json_file.open("r") as f:
                data = json.load(f)

        data[test_name] = cs.to_json()

        with json_file.open("w") as f:
            json.dump(data, f, indent=4)
