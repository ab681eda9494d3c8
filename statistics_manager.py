# statistics_manager.py

import numpy as np
import logger as log

class StatisticsManager:
    """
    Handles the collection of per-generation time-series data for the
    whole world.
    """
    def __init__(self):
        self.data = {
            'generation': [],
            'empty_cells': [],
            'planetary_albedo': [],
            'mean_temperature': [],
            'dark_daisies': [],
            'light_daisies': [],
            'births': [],
            'deaths': []
        }

    def clear(self):
        for key in self.data:
            self.data[key].clear()
        log.log("[StatisticsManager] All data series cleared.")

    def add_data_point(self, generation, grid, temperatures, births, deaths):
        """
        Adds a single data point to all data series.
        `temperatures` is the field the generation was stepped under.
        """
        self.data['generation'].append(generation)
        self.data['empty_cells'].append(grid.empty_count())
        self.data['planetary_albedo'].append(grid.mean_albedo())
        self.data['mean_temperature'].append(float(np.mean(temperatures)))
        self.data['dark_daisies'].append(grid.dark_count())
        self.data['light_daisies'].append(grid.light_count())
        self.data['births'].append(births)
        self.data['deaths'].append(deaths)

    def has_data(self):
        """
        Checks if any data has been collected.
        """
        return len(self.data['generation']) > 0

    def __len__(self):
        return len(self.data['generation'])

    def row(self, index):
        return {key: series[index] for key, series in self.data.items()}

    def latest(self):
        if not self.has_data():
            return None
        return self.row(-1)

    def as_rows(self):
        return [self.row(i) for i in range(len(self))]

def format_report(row):
    """The two-line per-generation report."""
    return (f"empty cells: {row['empty_cells']}\n"
            f"planetary albedo: {row['planetary_albedo']}")
