from kubesite.cli.main import main

main()
