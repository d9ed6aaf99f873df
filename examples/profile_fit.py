from pyStump import DatasetGenerator, StumpTrainer
from pyStump.random_source import NumpyUniformSource

gen = DatasetGenerator(source=NumpyUniformSource(seed=0))
data = gen.generate(50000, 3)

m = StumpTrainer(store_history=True)
m.fit(data)
