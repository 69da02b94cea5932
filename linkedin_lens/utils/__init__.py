from linkedin_lens.utils.days import day_key, day_label, day_range, range_days

__all__ = ["day_key", "day_label", "day_range", "range_days"]
