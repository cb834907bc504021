from setuptools import setup

setup(name='crooksbayes',
      version='0.0.0',
      description='Sequential Crooks-Bayes estimation of free energy differences from forward / backward work',
      author='Josh Fass, John Chodera',
      author_email='{josh.fass, john.chodera}@choderalab.org',
      license='MIT',
      packages=['crooksbayes', 'crooksbayes.estimation', 'crooksbayes.experiments',
                'crooksbayes.tests', 'crooksbayes.testsystems', 'crooksbayes.utilities'],
      install_requires=['numpy', 'scipy', 'tqdm', 'openmm'],
      extras_require={'test': ['pytest']})
