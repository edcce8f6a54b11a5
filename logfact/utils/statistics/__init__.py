from .gammaln import checked_logfactorial, logfactorial
