import math

from ..formatting import fixed
from ..schema import numeric_projection
from ..stats import basic_stats, histogram
from .base import AnalysisBase, AnalysisResult, histogram_chart


class DistributionAnalysis(AnalysisBase):
    kind_name = 'distribution'

    def compute(self, dataset, column, config=None):
        cfg = config or self.cfg
        res = AnalysisResult(kind='distribution', column=column)
        nums = numeric_projection(dataset, column)
        if not nums:
            res.warnings.append(f'Column "{column}" has no numeric values')
            res.report_text = f'Column "{column}" contains no numeric data for distribution analysis.'
            return res

        st = basic_stats(nums)
        bins = histogram(nums, cfg.bins)
        res.computed = {
            'mean': st.mean,
            'median': st.median,
            'std_dev': st.std_dev,
            'skewness': st.skewness,
            'histogram': [{'range': b.label, 'count': b.count} for b in bins],
        }

        text = f'Distribution Analysis for "{column}":\n\n'
        text += f'Mean: {fixed(st.mean)}\n'
        text += f'Median: {fixed(st.median)}\n'
        text += f'Standard Deviation: {fixed(st.std_dev)}\n'
        text += f'Skewness: {fixed(st.skewness)}\n\n'
        text += f'Histogram ({cfg.bins} bins):\n'
        peak = max(b.count for b in bins)
        for b in bins:
            bar = '█' * int(math.floor(b.count / peak * cfg.histogram_bar_width))
            text += f'{b.label}: {b.count} {bar}\n'
        res.report_text = text
        res.chart = histogram_chart('distribution', column, bins)
        return res
