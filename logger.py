# logger.py

# This will hold a reference to the running Simulation instance.
_simulation = None

def set_simulation(sim):
    """Sets the global simulation for the logger to read the generation from."""
    global _simulation
    _simulation = sim

def clear_simulation():
    global _simulation
    _simulation = None

def log(message):
    """Prints a message with a generation stamp if available."""
    # Check if a simulation is registered and has stepped at least once.
    if _simulation is not None and _simulation.generation > 0:
        print(f"[Gen {_simulation.generation:03d}] {message}")
    else:
        # For messages logged before the first generation.
        print(f"[Sim Start] {message}")
